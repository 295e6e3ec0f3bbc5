"""Pydantic models for MDSlides contracts."""

from .base import SlidesBaseModel
from .config import Config
from .deck import Deck, DeckSlide, Presentation
from .render_map import RenderMap, RenderMapEntry
from .slide import Heading, ImageRef, LayoutKind, QuoteBlock, SlideLayout

__all__ = [
    "Config",
    "SlidesBaseModel",
    "Deck",
    "DeckSlide",
    "Presentation",
    "Heading",
    "ImageRef",
    "LayoutKind",
    "QuoteBlock",
    "SlideLayout",
    "RenderMap",
    "RenderMapEntry",
]
