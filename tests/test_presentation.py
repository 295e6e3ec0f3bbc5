"""Presentation navigation tests."""

import unittest

from mdslides.normalize.parser import build_deck
from mdslides.presentation import PresentationState, presentation_from_document


class TestPresentationState(unittest.TestCase):
    def test_navigation_is_clamped(self) -> None:
        state = PresentationState(3)
        self.assertFalse(state.previous_slide())
        self.assertTrue(state.next_slide())
        self.assertTrue(state.next_slide())
        self.assertFalse(state.next_slide())
        self.assertEqual(state.current_index, 2)
        self.assertTrue(state.previous_slide())
        self.assertEqual(state.current_index, 1)

    def test_initial_index_clamped(self) -> None:
        self.assertEqual(PresentationState(3, current_index=10).current_index, 2)
        self.assertEqual(PresentationState(3, current_index=-4).current_index, 0)

    def test_empty_deck(self) -> None:
        state = PresentationState(0)
        self.assertEqual(state.current_index, 0)
        self.assertFalse(state.next_slide())
        self.assertFalse(state.previous_slide())

    def test_negative_count_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PresentationState(-1)

    def test_on_change_called_with_new_index(self) -> None:
        seen = []
        state = PresentationState(2, on_change=seen.append)
        state.next_slide()
        state.next_slide()
        state.previous_slide()
        self.assertEqual(seen, [1, 0])

    def test_for_deck(self) -> None:
        deck = build_deck("# A\n---\n# B\n---\n# C")
        state = PresentationState.for_deck(deck, current_index=1)
        self.assertEqual(state.slide_count, 3)
        self.assertEqual(state.current_index, 1)

    def test_presentation_from_document(self) -> None:
        presentation = presentation_from_document("# A\n\n---\n\n# B", title="Talk", author="Me")
        self.assertEqual(presentation.slides, ["# A", "# B"])
        self.assertEqual(presentation.title, "Talk")
        self.assertEqual(presentation.current_index, 0)


if __name__ == "__main__":
    unittest.main()
