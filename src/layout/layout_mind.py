"""
Export the canvas grid to an XMind mind map: root -> document -> heading.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from .canvas_schema import CanvasDocument


def _group_by_file(canvas: CanvasDocument) -> list[tuple[str, list[str]]]:
    """(file, [subpath, ...]) in first-seen order; nodes without subpath add no heading."""
    order: list[str] = []
    headings: dict[str, list[str]] = {}
    for node in canvas.nodes:
        if node.file not in headings:
            order.append(node.file)
            headings[node.file] = []
        if node.subpath:
            headings[node.file].append(node.subpath)
    return [(f, headings[f]) for f in order]


def build_xmind(
    canvas: CanvasDocument,
    out_path: Path | str,
    *,
    sheet_title: str = "Canvas Table",
) -> Path:
    """
    Build an XMind mind map from the canvas grid. The root topic is sheet_title, each
    document is a subtopic and each of its heading anchors a subtopic below it.
    Saves to out_path (e.g. output.xmind).
    """
    try:
        from py_xmind16 import Workbook
    except ImportError as e:
        raise ImportError("py-xmind16 is required for --xmind. Install with: pip install py-xmind16") from e

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    sheet = workbook.create_sheet(sheet_title)
    root = sheet.get_root_topic()

    groups = _group_by_file(canvas)
    if not groups:
        root.title = "(No content)"
        workbook.save(str(out_path))
        return out_path

    root.title = sheet_title
    for file_str, subpaths in groups:
        doc_topic = root.add_subtopic(file_str)
        for subpath in subpaths:
            doc_topic.add_subtopic(subpath)

    workbook.save(str(out_path))
    return out_path


def _root_topics(xmind_path: Path | str) -> list[Any]:
    from py_xmind16 import Workbook

    w = Workbook.load(str(xmind_path))
    sheets = (w.get_sheet(i) for i in range(w.sheet_count))
    return [s.root_topic for s in sheets if s.root_topic]


def load_xmind_topic_titles(xmind_path: Path | str) -> list[str]:
    """
    Read back a workbook written by build_xmind: sheet title, then each document
    path followed by its heading anchors, depth-first.
    """
    titles: list[str] = []

    def walk(topic: Any) -> None:
        t = getattr(topic, "title", None)
        if t:
            titles.append(str(t).strip())
        for st in getattr(topic, "subtopics", []) or []:
            walk(st)

    for root in _root_topics(xmind_path):
        walk(root)
    return titles


def load_xmind_parent_child_pairs(xmind_path: Path | str) -> list[tuple[str, str]]:
    """
    (parent, child) title pairs of a build_xmind workbook: (sheet title, document)
    and (document, heading anchor). Used to check the grid survived the export.
    """
    pairs: list[tuple[str, str]] = []

    def walk(parent_title: str | None, topic: Any) -> None:
        t = getattr(topic, "title", None)
        if not t:
            return
        current = str(t).strip()
        if parent_title is not None:
            pairs.append((parent_title, current))
        for st in getattr(topic, "subtopics", []) or []:
            walk(current, st)

    for root in _root_topics(xmind_path):
        walk(None, root)
    return pairs
