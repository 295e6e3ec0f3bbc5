"""Split a Markdown document into slide bodies."""

from __future__ import annotations

import re
from typing import Iterable, List

SLIDE_DELIMITER = re.compile(r"\n-{3,}\n")
SLIDE_SEPARATOR = "\n\n---\n\n"


def segment_into_slides(document: str) -> List[str]:
    """Split ``document`` on lines of three or more hyphens.

    Each gap between delimiters is trimmed; empty gaps are dropped. A
    document without delimiters yields one slide, or none when it is blank.
    """
    slides: List[str] = []
    last_index = 0
    for match in SLIDE_DELIMITER.finditer(document):
        slide = document[last_index:match.start()].strip()
        if slide:
            slides.append(slide)
        last_index = match.end()

    tail = document[last_index:].strip()
    if tail:
        slides.append(tail)
    return slides


def join_slides(slides: Iterable[str]) -> str:
    """Serialize slide bodies back into a single document."""
    return SLIDE_SEPARATOR.join(slides)
