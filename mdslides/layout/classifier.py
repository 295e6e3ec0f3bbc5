"""Slide layout classification.

Picks exactly one LayoutKind per slide body by evaluating the layout rules
in a fixed priority order; the first rule that matches wins.
"""

from __future__ import annotations

from typing import Optional

from ..models.slide import LayoutKind, SlideLayout
from ..normalize.markdown import (
    body_text,
    extract_heading,
    extract_images,
    extract_quote,
    is_quote_line,
    strip_first_heading,
    strip_images,
)

__all__ = [
    "classify",
    "classify_slide",
    "extract_heading",
    "extract_images",
    "extract_quote",
    "strip_first_heading",
    "strip_images",
]

IMAGE_LAYOUTS = {
    1: LayoutKind.SINGLE_IMAGE,
    2: LayoutKind.DOUBLE_IMAGE,
}


def _image_layout(image_count: int) -> Optional[LayoutKind]:
    if image_count <= 0:
        return None
    return IMAGE_LAYOUTS.get(image_count, LayoutKind.GRID_IMAGES)


def classify(body: str) -> LayoutKind:
    """Return the layout for a slide body."""
    title = extract_heading(body, 1)
    subtitle = extract_heading(body, 2)
    rest = strip_first_heading(body)
    images = extract_images(rest)
    text_without_images = strip_images(rest)

    if title is not None and not images and not body_text(text_without_images):
        if subtitle is not None:
            return LayoutKind.TITLE_SUBTITLE
        return LayoutKind.TITLE_ONLY

    # A stray "![" also rules out the quote layout.
    if "![" not in rest and any(is_quote_line(line) for line in rest.split("\n")):
        return LayoutKind.QUOTE

    if not text_without_images.strip():
        image_layout = _image_layout(len(images))
        if image_layout is not None:
            return image_layout

    return LayoutKind.STANDARD


def classify_slide(body: str) -> SlideLayout:
    """Classify a slide and extract the fields a renderer needs."""
    rest = strip_first_heading(body)
    return SlideLayout(
        layout=classify(body),
        title=extract_heading(body, 1),
        subtitle=extract_heading(body, 2),
        images=extract_images(rest),
        quote=extract_quote(rest),
    )
