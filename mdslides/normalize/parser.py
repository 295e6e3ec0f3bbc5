"""Markdown document to Deck parser.

Segments a document into slides and classifies every slide, tagging the
result with a stable hash of the source text.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from ..layout.classifier import classify_slide
from ..models.deck import Deck, DeckSlide
from .segmenter import segment_into_slides


def _compute_hash(content: str) -> str:
    """Compute a stable hash of the content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()[:16]


def build_deck(document: str, doc_id: str = "inline") -> Deck:
    """Segment and classify ``document`` into a Deck."""
    slides = [
        DeckSlide(index=index, body=body, layout=classify_slide(body))
        for index, body in enumerate(segment_into_slides(document))
    ]
    return Deck(doc_id=doc_id, source_hash=_compute_hash(document), slides=slides)


def load_deck(path: Path) -> Deck:
    """Read a Markdown file and build its Deck.

    Args:
        path: Path to a UTF-8 Markdown document

    Returns:
        Deck whose doc_id is the file stem
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing document: {path}")
    content = path.read_text(encoding="utf-8")
    return build_deck(content, doc_id=path.stem or "untitled")
