"""
Obsidian canvas schema: file nodes on a grid, plus an edge list that stays empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FILE_NODE_TYPE = "file"


@dataclass(frozen=True)
class GridGeometry:
    """Node size and spacing, in canvas units. Not validated; negatives overlap."""
    width: int = 400
    height: int = 420
    spacing_x: int = 20
    spacing_y: int = 20


@dataclass(frozen=True)
class CanvasNode:
    """One grid cell: a reference to a Markdown file, optionally at a heading."""
    id: str
    file: str
    x: int
    y: int
    width: int
    height: int
    subpath: str | None = None
    type: str = FILE_NODE_TYPE

    def to_dict(self) -> dict[str, Any]:
        # subpath is left out rather than written as null; the canvas viewer rejects null
        d: dict[str, Any] = {"id": self.id, "type": self.type, "file": self.file}
        if self.subpath:
            d["subpath"] = self.subpath
        d.update(x=self.x, y=self.y, width=self.width, height=self.height)
        return d


@dataclass
class CanvasDocument:
    nodes: list[CanvasNode] = field(default_factory=list)
    edges: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": list(self.edges),
        }
