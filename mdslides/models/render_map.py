"""RenderMap contracts."""

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .base import SlidesBaseModel
from .slide import LayoutKind


class RenderMapEntry(SlidesBaseModel):
    slide_index: int
    layout: LayoutKind
    pptx_layout: str
    images_placed: int = 0
    missing_assets: List[str] = Field(default_factory=list)


class RenderMap(SlidesBaseModel):
    entries: Dict[str, RenderMapEntry] = Field(default_factory=dict)
