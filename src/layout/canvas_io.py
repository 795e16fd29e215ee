"""
Read and write .canvas files (JSON, two-space indent).
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .canvas_schema import FILE_NODE_TYPE, CanvasDocument, CanvasNode


def canvas_to_json(canvas: CanvasDocument) -> str:
    return json.dumps(canvas.to_dict(), ensure_ascii=False, indent=2)


def write_canvas(canvas: CanvasDocument, out_path: Path | str) -> Path:
    """Write canvas to out_path (parent dirs created). Returns out_path."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(canvas_to_json(canvas), encoding="utf-8")
    return out_path


def canvas_from_dict(data: Any) -> CanvasDocument:
    """
    Parse a canvas JSON object back into a CanvasDocument. Only file nodes are kept;
    a missing subpath becomes None. Raises ValueError if data is not a canvas object.
    """
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise ValueError("Not a canvas document: expected an object with a 'nodes' array")
    nodes: list[CanvasNode] = []
    for item in data["nodes"]:
        if not isinstance(item, dict) or item.get("type") != FILE_NODE_TYPE:
            continue
        try:
            nodes.append(
                CanvasNode(
                    id=str(item["id"]),
                    file=str(item["file"]),
                    subpath=item.get("subpath") or None,
                    x=int(item["x"]),
                    y=int(item["y"]),
                    width=int(item["width"]),
                    height=int(item["height"]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid file node: {item!r}") from e
    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise ValueError("Not a canvas document: 'edges' must be an array")
    return CanvasDocument(nodes=nodes, edges=[e for e in edges if isinstance(e, dict)])


def load_canvas(path: Path | str) -> CanvasDocument:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Canvas not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Canvas is not valid JSON: {path}") from e
    return canvas_from_dict(data)
