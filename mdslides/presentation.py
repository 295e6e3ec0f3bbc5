"""Presentation navigation state."""

from __future__ import annotations

from typing import Callable, Optional

from .models.deck import Deck, Presentation
from .normalize.segmenter import segment_into_slides


class PresentationState:
    """Track the current slide of a running presentation.

    The index is always kept within ``[0, slide_count - 1]``; ``on_change``
    is called with the new index whenever navigation moves it.
    """

    def __init__(
        self,
        slide_count: int,
        current_index: int = 0,
        on_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        if slide_count < 0:
            raise ValueError(f"slide_count must be >= 0, got {slide_count}")
        self.slide_count = slide_count
        self.current_index = max(0, min(current_index, slide_count - 1))
        self.on_change = on_change

    @classmethod
    def for_deck(cls, deck: Deck, current_index: int = 0) -> "PresentationState":
        return cls(len(deck.slides), current_index)

    def next_slide(self) -> bool:
        if self.current_index < self.slide_count - 1:
            self._move(self.current_index + 1)
            return True
        return False

    def previous_slide(self) -> bool:
        if self.current_index > 0:
            self._move(self.current_index - 1)
            return True
        return False

    def _move(self, index: int) -> None:
        self.current_index = index
        if self.on_change is not None:
            self.on_change(index)


def presentation_from_document(document: str, title: str = "", author: str = "") -> Presentation:
    return Presentation(title=title, author=author, slides=segment_into_slides(document))
