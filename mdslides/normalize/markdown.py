"""Markdown micro-parsers shared by the segmenter, classifier and editor.

Each helper is a pure function over a string. Lines are split on ``\\n`` and
rejoined the same way so that stripping operations keep the rest of the
text verbatim.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional

from ..models.slide import Heading, ImageRef, QuoteBlock

IMAGE_PATTERN = re.compile(r"!\[(.*?)\]\((.*?)\)")
LINK_PATTERN = re.compile(r"\[(.*?)\]\((.*?)\)")
BARE_URL_PATTERN = re.compile(r"https?://[^\s]+")
ATTRIBUTION_PREFIX = re.compile(r"^[—-]+\s*")

ATTRIBUTION_MAX_LENGTH = 30


class CodeBlock(NamedTuple):
    start: int
    end: int
    code: str


def _lines(markdown: str) -> List[str]:
    return markdown.split("\n")


def parse_heading(line: str) -> Optional[Heading]:
    """Parse a heading line, returning a Heading or None."""
    match = re.match(r"^(#{1,6})\s+(.*)$", line.strip())
    if match:
        return Heading(level=len(match.group(1)), text=match.group(2).strip())
    return None


def is_heading_line(line: str) -> bool:
    return re.match(r"^#{1,6}(\s|$)", line.strip()) is not None


def is_quote_line(line: str) -> bool:
    return line.strip().startswith(">")


def extract_heading(body: str, level: int) -> Optional[str]:
    """Return the text of the first heading of exactly ``level``.

    ``extract_heading(body, 1)`` never matches a ``##`` line because the
    marker must be followed by a space.
    """
    prefix = "#" * level + " "
    for line in _lines(body):
        stripped = line.strip()
        if stripped.startswith(prefix):
            return stripped[len(prefix):].strip()
    return None


def _is_title_line(line: str) -> bool:
    return line.strip().startswith("# ")


def strip_first_heading(body: str) -> str:
    """Remove the first level-1 heading line, keeping everything else verbatim."""
    lines = _lines(body)
    for index, line in enumerate(lines):
        if _is_title_line(line):
            return "\n".join(lines[:index] + lines[index + 1:])
    return body


def extract_images(body: str) -> List[ImageRef]:
    return [
        ImageRef(alt=match.group(1), url=match.group(2))
        for match in IMAGE_PATTERN.finditer(body)
    ]


def strip_images(body: str) -> str:
    return IMAGE_PATTERN.sub("", body)


def extract_quote(body: str) -> Optional[QuoteBlock]:
    """Collect ``>`` lines into a quote and an optional attribution.

    A quote line is an attribution when it starts with ``--`` or an em-dash,
    or when it is not the first collected quote line and is shorter than
    ATTRIBUTION_MAX_LENGTH characters. Only the last such line is kept.
    """
    quote_lines: List[str] = []
    attribution = ""
    for line in _lines(body):
        stripped = line.strip()
        if not stripped.startswith(">"):
            continue
        text = stripped[1:].strip()
        if (
            text.startswith("--")
            or text.startswith("—")
            or (quote_lines and len(text) < ATTRIBUTION_MAX_LENGTH)
        ):
            attribution = ATTRIBUTION_PREFIX.sub("", text)
        else:
            quote_lines.append(text)

    if not quote_lines:
        return None
    return QuoteBlock(text=" ".join(quote_lines), attribution=attribution)


def body_text(markdown: str) -> str:
    """Flatten non-heading, non-blank lines into a single space-joined string."""
    return " ".join(
        line.strip()
        for line in _lines(markdown)
        if line.strip() and not is_heading_line(line)
    )


def extract_links(markdown: str) -> List[str]:
    """Return link targets followed by bare http(s) URLs found outside links."""
    urls = [match.group(2) for match in LINK_PATTERN.finditer(markdown)]
    remainder = LINK_PATTERN.sub("", markdown)
    urls.extend(match.group(0) for match in BARE_URL_PATTERN.finditer(remainder))
    return urls


def title_and_url(body: str) -> Optional[str]:
    """Return the URL of a slide made of a title and a single URL, else None."""
    title = extract_heading(body, 1)
    if not title:
        return None
    rest = strip_first_heading(body).strip()
    urls = extract_links(rest)
    if len(urls) != 1:
        return None
    if rest and rest != urls[0]:
        return None
    return urls[0]


def extract_code_blocks(markdown: str, language: str = "manim") -> List[CodeBlock]:
    """Find fenced code blocks tagged with ``language``.

    Returns the span of the whole fence and the code between the fences.
    """
    pattern = re.compile(r"```" + re.escape(language) + r"\n([\s\S]*?)\n```")
    return [
        CodeBlock(start=match.start(), end=match.end(), code=match.group(1))
        for match in pattern.finditer(markdown)
    ]

