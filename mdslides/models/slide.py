"""Slide classification contracts."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import SlidesBaseModel


class LayoutKind(str, Enum):
    STANDARD = "standard"
    TITLE_ONLY = "title_only"
    TITLE_SUBTITLE = "title_subtitle"
    SINGLE_IMAGE = "single_image"
    DOUBLE_IMAGE = "double_image"
    GRID_IMAGES = "grid_images"
    QUOTE = "quote"


class Heading(SlidesBaseModel):
    level: int = Field(..., ge=1, le=6)
    text: str


class ImageRef(SlidesBaseModel):
    alt: str = Field(..., description="Alt text, verbatim")
    url: str = Field(..., description="URL or path, unresolved")


class QuoteBlock(SlidesBaseModel):
    text: str
    attribution: str = ""


class SlideLayout(SlidesBaseModel):
    layout: LayoutKind
    title: Optional[str] = None
    subtitle: Optional[str] = None
    images: List[ImageRef] = Field(default_factory=list)
    quote: Optional[QuoteBlock] = None
