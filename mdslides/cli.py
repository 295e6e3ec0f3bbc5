"""CLI entry point for MDSlides."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

from .config import load_config
from .logging_utils import RunLog
from .models.config import Config
from .models.deck import Deck
from .normalize.parser import load_deck
from .render.renderer import Renderer


def _generate_run_id() -> str:
    """Generate a timestamp-based run ID."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-root",
        type=str,
        default=None,
        help="Path to project root (default: auto-detect)",
    )
    parser.add_argument(
        "--run-id", type=str, default=None, help="Run ID (default: auto-generated timestamp)"
    )


def _load_config(args: argparse.Namespace) -> Config:
    return load_config(Path(args.project_root) if args.project_root else None)


def _outline(
    config: Config, doc_path: Path, run_id: Optional[str]
) -> Optional[Tuple[Deck, Path, RunLog]]:
    if not doc_path.exists():
        print(f"ERROR: Document not found: {doc_path}")
        return None

    run_id = run_id or _generate_run_id()
    run_dir = Path(config.runs_dir) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)
    run_log = RunLog(run_dir, run_id)

    deck = load_deck(doc_path)
    run_log.event("DOC_LOADED", path=str(doc_path), source_hash=deck.source_hash)

    deck_path = run_dir / "deck.json"
    with open(deck_path, "w", encoding="utf-8") as f:
        f.write(deck.to_json())

    layouts = {}
    for slide in deck.slides:
        kind = slide.layout.layout.value
        layouts[kind] = layouts.get(kind, 0) + 1
        title = slide.layout.title or ""
        print(f"{slide.index + 1:>3}  {kind:<15} {title}")

    run_log.event("OUTLINE_DONE", slide_count=len(deck.slides), layouts=layouts)
    print(f"Deck saved to: {deck_path}")
    return deck, run_dir, run_log


def _export(config: Config, deck: Deck, run_dir: Path, run_log: RunLog) -> int:
    if not deck.slides:
        print("ERROR: Document has no slides to export")
        return 1

    output_path = run_dir / "deck.pptx"
    render_map = Renderer().render(deck, output_path, asset_root=Path(config.project_root))

    render_map_path = run_dir / "render_map.json"
    with open(render_map_path, "w", encoding="utf-8") as f:
        f.write(render_map.to_json())

    missing = sum(len(entry.missing_assets) for entry in render_map.entries.values())
    run_log.event(
        "RENDER_DONE",
        output_path=str(output_path),
        slides_rendered=len(render_map.entries),
        missing_assets=missing,
    )

    print(f"Rendered {len(render_map.entries)} slides to: {output_path}")
    if missing:
        print(f"WARNING: {missing} image(s) could not be resolved")
    return 0


def cmd_outline(args: argparse.Namespace) -> int:
    """Segment and classify a document, writing deck.json."""
    config = _load_config(args)
    result = _outline(config, Path(args.doc), args.run_id)
    return 0 if result else 1


def cmd_export(args: argparse.Namespace) -> int:
    """Segment, classify and render a document to PPTX."""
    config = _load_config(args)
    result = _outline(config, Path(args.doc), args.run_id)
    if not result:
        return 1
    return _export(config, *result)


def cmd_smoke(args: argparse.Namespace) -> int:
    """Run outline and export on the sample document."""
    config = _load_config(args)
    doc_path = Path(args.doc) if args.doc else Path(config.sample_document_path)
    run_id = args.run_id or _generate_run_id()

    run_log = RunLog(Path(config.runs_dir) / run_id, run_id)
    run_log.event("SMOKE_START", doc_path=str(doc_path))

    result = _outline(config, doc_path, run_id)
    if not result:
        return 1
    status = _export(config, *result)

    run_log.event("SMOKE_DONE", success=status == 0)
    print("\nSmoke test complete!")
    print(f"  Run ID: {run_id}")
    print(f"  Artifacts directory: {result[1]}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="MDSlides CLI - Markdown slide layout classifier")
    subparsers = parser.add_subparsers(dest="command", required=True)

    outline_parser = subparsers.add_parser(
        "outline", help="Split and classify a Markdown document into deck.json"
    )
    _add_common_args(outline_parser)
    outline_parser.add_argument(
        "--doc", type=str, required=True, help="Path to Markdown document"
    )
    outline_parser.set_defaults(func=cmd_outline)

    export_parser = subparsers.add_parser(
        "export", help="Split, classify and render a Markdown document to PPTX"
    )
    _add_common_args(export_parser)
    export_parser.add_argument(
        "--doc", type=str, required=True, help="Path to Markdown document"
    )
    export_parser.set_defaults(func=cmd_export)

    smoke_parser = subparsers.add_parser(
        "smoke", help="Run outline and export on the sample document"
    )
    _add_common_args(smoke_parser)
    smoke_parser.add_argument(
        "--doc", type=str, default=None,
        help="Path to Markdown document (default: inputs/sample_deck.md)"
    )
    smoke_parser.set_defaults(func=cmd_smoke)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
