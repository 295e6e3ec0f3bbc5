"""Deck to PPTX renderer."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

from pptx import Presentation
from pptx.util import Emu, Inches, Pt

from ..models.deck import Deck, DeckSlide
from ..models.render_map import RenderMap, RenderMapEntry
from ..models.slide import ImageRef, LayoutKind
from ..normalize.markdown import parse_heading, strip_first_heading, strip_images

PPTX_LAYOUTS = {
    LayoutKind.TITLE_ONLY: "Title Slide",
    LayoutKind.TITLE_SUBTITLE: "Title Slide",
    LayoutKind.STANDARD: "Title and Content",
    LayoutKind.SINGLE_IMAGE: "Title Only",
    LayoutKind.DOUBLE_IMAGE: "Title Only",
    LayoutKind.GRID_IMAGES: "Title Only",
    LayoutKind.QUOTE: "Title Only",
}

# Columns used to arrange pictures for each layout.
IMAGE_COLUMNS = {
    LayoutKind.SINGLE_IMAGE: 1,
    LayoutKind.DOUBLE_IMAGE: 2,
    LayoutKind.GRID_IMAGES: 2,
    LayoutKind.STANDARD: 3,
}

MARGIN = Inches(0.5)
GUTTER = Inches(0.25)
CONTENT_TOP = Inches(1.75)
MIN_CELL_HEIGHT = Inches(0.4)


def _body_paragraphs(markdown: str) -> List[Tuple[str, int]]:
    """Turn slide body Markdown into (text, level) paragraphs."""
    paragraphs: List[Tuple[str, int]] = []
    for line in markdown.split("\n"):
        if not line.strip():
            continue
        heading = parse_heading(line)
        if heading:
            paragraphs.append((heading.text, 0))
            continue
        match = re.match(r"^(\s*)(?:[-*+]|\d+\.)\s+(.+)$", line)
        if match:
            paragraphs.append((match.group(2).strip(), 1 if match.group(1) else 0))
            continue
        paragraphs.append((line.strip(), 0))
    return paragraphs


class Renderer:
    def __init__(self, template_path: Optional[Path] = None) -> None:
        self.template_path = template_path

    def render(self, deck: Deck, output_path: Path, asset_root: Optional[Path] = None) -> RenderMap:
        """Render a Deck to PPTX and return a RenderMap."""
        if not deck.slides:
            raise ValueError(f"Deck has no slides: {deck.doc_id}")

        prs = Presentation(str(self.template_path)) if self.template_path else Presentation()
        render_map = RenderMap()

        for slide_spec in deck.slides:
            kind = slide_spec.layout.layout
            layout_name = PPTX_LAYOUTS[kind]
            layout = prs.slide_layouts.get_by_name(layout_name)
            if layout is None:
                raise ValueError(f"Template has no layout named: {layout_name}")
            slide = prs.slides.add_slide(layout)

            self._apply_title(slide, slide_spec)
            if kind == LayoutKind.STANDARD:
                self._apply_body(slide, slide_spec)
            elif kind == LayoutKind.QUOTE:
                self._apply_quote(prs, slide, slide_spec)

            placed, missing = self._apply_images(prs, slide, slide_spec, asset_root)
            slide.notes_slide.notes_text_frame.text = slide_spec.body

            render_map.entries[f"slide_{slide_spec.index + 1}"] = RenderMapEntry(
                slide_index=len(prs.slides) - 1,
                layout=kind,
                pptx_layout=layout_name,
                images_placed=placed,
                missing_assets=missing,
            )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        prs.save(str(output_path))
        return render_map

    def _apply_title(self, slide, slide_spec: DeckSlide) -> None:
        layout = slide_spec.layout
        for shape in slide.placeholders:
            idx = shape.placeholder_format.idx
            if idx == 0 and layout.title is not None:
                shape.text_frame.text = layout.title
            elif (
                idx == 1
                and layout.layout == LayoutKind.TITLE_SUBTITLE
                and layout.subtitle is not None
            ):
                shape.text_frame.text = layout.subtitle

    def _apply_body(self, slide, slide_spec: DeckSlide) -> None:
        body = self._placeholder(slide, 1)
        if body is None:
            return
        paragraphs = _body_paragraphs(strip_images(strip_first_heading(slide_spec.body)))
        text_frame = body.text_frame
        text_frame.clear()
        for position, (text, level) in enumerate(paragraphs):
            paragraph = (
                text_frame.paragraphs[0] if position == 0 else text_frame.add_paragraph()
            )
            paragraph.text = text
            paragraph.level = level

    def _apply_quote(self, prs, slide, slide_spec: DeckSlide) -> None:
        quote = slide_spec.layout.quote
        if quote is None:
            return
        box = slide.shapes.add_textbox(
            MARGIN,
            CONTENT_TOP,
            prs.slide_width - 2 * MARGIN,
            prs.slide_height - CONTENT_TOP - MARGIN,
        )
        text_frame = box.text_frame
        text_frame.word_wrap = True
        text_frame.paragraphs[0].text = f"“{quote.text}”"
        text_frame.paragraphs[0].font.size = Pt(28)
        if quote.attribution:
            attribution = text_frame.add_paragraph()
            attribution.text = f"— {quote.attribution}"
            attribution.font.size = Pt(18)

    def _apply_images(
        self, prs, slide, slide_spec: DeckSlide, asset_root: Optional[Path]
    ) -> Tuple[int, List[str]]:
        images = slide_spec.layout.images
        if not images:
            return 0, []

        resolved: List[Path] = []
        missing: List[str] = []
        for image in images:
            path = self._resolve_asset_path(image, asset_root)
            if path is None:
                missing.append(image.url)
            else:
                resolved.append(path)
        if not resolved:
            return 0, missing

        kind = slide_spec.layout.layout
        columns = min(IMAGE_COLUMNS.get(kind, 1), len(resolved))
        rows = -(-len(resolved) // columns)
        top = CONTENT_TOP
        if kind == LayoutKind.STANDARD:
            top = prs.slide_height - Inches(2.25)
        area_width = prs.slide_width - 2 * MARGIN
        area_height = prs.slide_height - top - MARGIN
        max_rows = max(1, (area_height + GUTTER) // (MIN_CELL_HEIGHT + GUTTER))
        if rows > max_rows:
            # Widen the grid rather than shrink rows below the minimum height.
            rows = max_rows
            columns = -(-len(resolved) // rows)
        cell_width = max(1, int((area_width - GUTTER * (columns - 1)) / columns))
        cell_height = max(1, int((area_height - GUTTER * (rows - 1)) / rows))

        for position, path in enumerate(resolved):
            row, column = divmod(position, columns)
            left = MARGIN + column * (cell_width + GUTTER)
            cell_top = top + row * (cell_height + GUTTER)
            picture = slide.shapes.add_picture(str(path), left, cell_top, width=Emu(cell_width))
            if picture.height > cell_height:
                ratio = cell_height / picture.height
                picture.height = Emu(cell_height)
                picture.width = Emu(int(picture.width * ratio))
            picture.left = Emu(int(left + (cell_width - picture.width) / 2))
        return len(resolved), missing

    def _placeholder(self, slide, idx: int):
        for shape in slide.placeholders:
            if shape.placeholder_format.idx == idx:
                return shape
        return None

    def _resolve_asset_path(self, image: ImageRef, asset_root: Optional[Path]) -> Optional[Path]:
        url = image.url.strip()
        if url.startswith("file://"):
            url = url[len("file://"):]
        if not url or re.match(r"^[a-z][a-z0-9+.-]*://", url, re.IGNORECASE):
            return None
        asset_path = Path(url)
        if asset_path.is_absolute() and asset_path.is_file():
            return asset_path
        if asset_root is not None:
            # "/assets/x.png" style paths are rooted at the asset root.
            candidate = asset_root / url.lstrip("/")
            if candidate.is_file():
                return candidate
        return None
