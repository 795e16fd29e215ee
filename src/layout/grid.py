"""
Grid layout: one row per document, one column per heading; each cell is a file node
anchored at that heading.
"""
from __future__ import annotations

import logging
import uuid
from pathlib import Path, PurePath
from typing import Callable, Sequence

from .canvas_schema import CanvasDocument, CanvasNode, GridGeometry

logger = logging.getLogger(__name__)

HEADING_MARKER = "#"


def generate_id() -> str:
    """16-character lowercase hex id, the same shape Obsidian uses for node ids."""
    return uuid.uuid4().hex[:16]


def normalize_heading(heading: str) -> str:
    """Prefix heading with '#' unless it already starts with one."""
    if heading.startswith(HEADING_MARKER):
        return heading
    return HEADING_MARKER + heading


def make_relative_path(file_path: PurePath | str, base_path: PurePath | str | None = None) -> str:
    """
    Path as written into the canvas: relative to base_path when file_path is below it,
    otherwise the path itself without a leading '/' (Obsidian does not accept root-rooted paths).
    """
    file_path = PurePath(file_path)
    if base_path is not None:
        try:
            return file_path.relative_to(PurePath(base_path)).as_posix()
        except ValueError:
            pass
    path_str = file_path.as_posix()
    if path_str.startswith("/"):
        return path_str[1:]
    return path_str


def column_positions(count: int, geometry: GridGeometry) -> list[int]:
    """x of each column: i * (width + spacing_x)."""
    step = geometry.width + geometry.spacing_x
    return [i * step for i in range(count)]


def row_positions(count: int, geometry: GridGeometry) -> list[int]:
    """y of each row, each one height + spacing_y below the previous."""
    ys: list[int] = []
    current_y = 0
    for _ in range(count):
        ys.append(current_y)
        current_y += geometry.height + geometry.spacing_y
    return ys


def generate_canvas(
    files: Sequence[Path | str],
    headings: Sequence[str],
    geometry: GridGeometry | None = None,
    *,
    base_path: Path | str | None = None,
    id_factory: Callable[[], str] = generate_id,
) -> CanvasDocument:
    """
    Build the canvas grid: len(files) * len(headings) file nodes, row-major
    (files outer, headings inner), no edges. Order of files and headings is kept
    as given; duplicate headings become duplicate columns.
    """
    geometry = geometry or GridGeometry()
    xs = column_positions(len(headings), geometry)
    ys = row_positions(len(files), geometry)

    nodes: list[CanvasNode] = []
    for row, file_path in enumerate(files):
        file_str = make_relative_path(file_path, base_path)
        for col, heading in enumerate(headings):
            nodes.append(
                CanvasNode(
                    id=id_factory(),
                    file=file_str,
                    subpath=normalize_heading(heading),
                    x=xs[col],
                    y=ys[row],
                    width=geometry.width,
                    height=geometry.height,
                )
            )
    logger.debug("Grid %d x %d -> %d node(s)", len(files), len(headings), len(nodes))
    return CanvasDocument(nodes=nodes, edges=[])
