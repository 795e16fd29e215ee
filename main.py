#!/usr/bin/env python3
"""
Root entry: scan a notes folder for Markdown files -> Obsidian canvas grid (files x headings).
Supports --preview (debug HTML + PNG overview) and --xmind (mind map export).
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from src.config import (
    load_env,
    split_headings,
    get_notes_dir,
    get_default_headings,
    get_base_path,
    get_node_width,
    get_node_height,
    get_spacing_x,
    get_spacing_y,
)
from src.notes import find_markdown_files
from src.layout import (
    GridGeometry,
    generate_canvas,
    write_canvas,
    write_canvas_preview_html,
    render_canvas_overview,
    build_xmind,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.canvas"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Obsidian canvas files for literature review comparison tables: "
        "one row per Markdown file, one column per heading."
    )
    parser.add_argument(
        "-f", "--folder",
        type=Path,
        default=None,
        help="Path to the folder containing markdown files (default: NOTES_DIR from .env)",
    )
    parser.add_argument(
        "-H", "--headings",
        type=split_headings,
        action="extend",
        default=None,
        help='Headings to include as columns, comma-separated (e.g. "Model,Data,Metrics"); may be repeated',
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT),
        help=f"Output canvas file path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("-w", "--width", type=int, default=None, help="Width of each node (default: 400)")
    parser.add_argument("-e", "--height", type=int, default=None, help="Height of each node (default: 420)")
    parser.add_argument(
        "-x", "--spacing-x", type=int, default=None, help="Horizontal spacing between columns (default: 20)"
    )
    parser.add_argument(
        "-y", "--spacing-y", type=int, default=None, help="Vertical spacing between rows (default: 20)"
    )
    parser.add_argument(
        "-b", "--base-path",
        type=Path,
        default=None,
        help="Base path for relative file paths in canvas (leave empty for absolute paths)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Also write .debug/<name>_preview.html and <name>_overview.png next to the output",
    )
    parser.add_argument(
        "--xmind",
        action="store_true",
        help="Also export the grid to <name>.xmind (mind map: document -> headings)",
    )
    return parser


def _resolve_geometry(args: argparse.Namespace) -> GridGeometry:
    """CLI values win; unset ones come from CANVAS_* env or the built-in defaults."""
    return GridGeometry(
        width=args.width if args.width is not None else get_node_width(),
        height=args.height if args.height is not None else get_node_height(),
        spacing_x=args.spacing_x if args.spacing_x is not None else get_spacing_x(),
        spacing_y=args.spacing_y if args.spacing_y is not None else get_spacing_y(),
    )


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    load_env()
    folder = args.folder if args.folder is not None else get_notes_dir()
    if folder is None:
        logger.error("No folder given. Pass --folder or set NOTES_DIR in .env")
        return 1
    if not folder.exists():
        logger.error("Folder '%s' does not exist", folder)
        return 1
    if not folder.is_dir():
        logger.error("'%s' is not a directory", folder)
        return 1

    headings = args.headings if args.headings is not None else get_default_headings()
    if not headings:
        logger.error("At least one heading must be provided (-H or CANVAS_HEADINGS)")
        return 1

    try:
        geometry = _resolve_geometry(args)
    except ValueError as e:
        logger.error("%s", e)
        return 1
    base_path = args.base_path if args.base_path is not None else get_base_path()

    return _run_canvas(
        folder,
        headings,
        geometry,
        args.output,
        base_path=base_path,
        use_preview=args.preview,
        use_xmind=args.xmind,
    )


def _run_canvas(
    folder: Path,
    headings: list[str],
    geometry: GridGeometry,
    output: Path,
    *,
    base_path: Path | None = None,
    use_preview: bool = False,
    use_xmind: bool = False,
) -> int:
    """Find Markdown files, build the grid, write the canvas and optional extras."""
    t0 = time.perf_counter()
    files = find_markdown_files(folder)
    if not files:
        logger.warning("No markdown files found in '%s'", folder)

    logger.info("Found %d markdown file(s)", len(files))
    logger.info("Generating canvas with %d column(s)", len(headings))

    canvas = generate_canvas(files, headings, geometry, base_path=base_path)
    logger.info("Created %d node(s)", len(canvas.nodes))

    try:
        write_canvas(canvas, output)
    except OSError as e:
        logger.error("Failed to write canvas file '%s': %s", output, e)
        return 1
    logger.info("Canvas file written to: %s", output)

    if use_preview:
        debug_dir = output.parent / ".debug"
        try:
            write_canvas_preview_html(canvas, debug_dir / f"{output.stem}_preview.html")
            logger.info("  .debug: %s_preview.html", output.stem)
        except Exception as e:
            logger.warning("  Failed to write %s_preview.html: %s", output.stem, e)
        try:
            render_canvas_overview(canvas, debug_dir / f"{output.stem}_overview.png")
            logger.info("  .debug: %s_overview.png", output.stem)
        except Exception as e:
            logger.warning("  Failed to write %s_overview.png: %s", output.stem, e)

    if use_xmind:
        try:
            xmind_path = build_xmind(canvas, output.with_suffix(".xmind"), sheet_title=output.stem)
            logger.info("XMind: %s", xmind_path.name)
        except Exception as e:
            logger.warning("XMind export failed: %s", e)

    logger.info("Done in %.2fs", time.perf_counter() - t0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
