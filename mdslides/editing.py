"""Editor helpers for inserting Markdown formatting and new slides."""

from __future__ import annotations

from typing import Optional, Tuple

from .normalize.segmenter import SLIDE_SEPARATOR

NEW_SLIDE_TEMPLATE = "# New Slide\n\nAdd content here"
LINK_PLACEHOLDER = "Link Text"
LINK_URL = "https://example.com"
IMAGE_PLACEHOLDER = "![Alt text](/assets/image.jpg)"

FORMAT_KINDS = (
    "header",
    "bold",
    "italic",
    "list.bullet",
    "list.number",
    "link",
    "image",
)

Selection = Tuple[int, int]


def _format(kind: str, selected: str, start: int) -> Tuple[str, Optional[Selection]]:
    if kind not in FORMAT_KINDS:
        raise ValueError(f"Unknown formatting kind: {kind}")
    if kind == "header":
        return f"# {selected}", None
    if kind == "bold":
        caret = (start + 2, start + 2) if not selected else None
        return f"**{selected}**", caret
    if kind == "italic":
        caret = (start + 1, start + 1) if not selected else None
        return f"*{selected}*", caret
    if kind == "list.bullet":
        return "\n".join(f"- {line}" for line in selected.split("\n")), None
    if kind == "list.number":
        return (
            "\n".join(
                f"{number}. {line}"
                for number, line in enumerate(selected.split("\n"), start=1)
            ),
            None,
        )
    if kind == "link":
        if not selected:
            placeholder = (start + 1, start + 1 + len(LINK_PLACEHOLDER))
            return f"[{LINK_PLACEHOLDER}]({LINK_URL})", placeholder
        return f"[{selected}]({LINK_URL})", None
    return IMAGE_PLACEHOLDER, None


def insert_formatting(text: str, kind: str, start: int, end: int) -> Tuple[str, Selection]:
    """Wrap the ``text[start:end]`` selection in Markdown for ``kind``.

    Returns the new text and the selection to apply afterwards. Unless the
    formatting asks for a specific caret or placeholder selection, the caret
    lands after the inserted text.
    """
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Selection out of range: ({start}, {end}) for length {len(text)}")
    formatted, selection = _format(kind, text[start:end], start)
    new_text = text[:start] + formatted + text[end:]
    if selection is None:
        caret = start + len(formatted)
        selection = (caret, caret)
    return new_text, selection


def append_new_slide(document: str) -> str:
    """Append a slide delimiter and a new slide template to ``document``."""
    if not document.strip():
        return NEW_SLIDE_TEMPLATE
    return document.rstrip() + SLIDE_SEPARATOR + NEW_SLIDE_TEMPLATE
