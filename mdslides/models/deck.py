"""Deck and presentation contracts."""

from __future__ import annotations

from typing import List

from pydantic import Field, constr

from .base import SlidesBaseModel
from .slide import SlideLayout

NonEmptyStr = constr(min_length=1)


class DeckSlide(SlidesBaseModel):
    index: int = Field(..., ge=0)
    body: NonEmptyStr
    layout: SlideLayout


class Deck(SlidesBaseModel):
    doc_id: NonEmptyStr
    source_hash: NonEmptyStr
    slides: List[DeckSlide] = Field(default_factory=list)


class Presentation(SlidesBaseModel):
    title: str = ""
    author: str = ""
    slides: List[str] = Field(default_factory=list)
    current_index: int = Field(0, ge=0)
