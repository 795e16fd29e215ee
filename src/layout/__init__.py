"""Layout: Markdown files x headings -> Obsidian canvas grid; debug preview; XMind export."""
from .canvas_schema import CanvasDocument, CanvasNode, GridGeometry
from .grid import generate_canvas, generate_id, normalize_heading, make_relative_path
from .canvas_io import canvas_to_json, write_canvas, canvas_from_dict, load_canvas
from .canvas_debug import write_canvas_preview_html, render_canvas_overview
from .layout_mind import build_xmind, load_xmind_topic_titles, load_xmind_parent_child_pairs

__all__ = [
    "CanvasDocument",
    "CanvasNode",
    "GridGeometry",
    "generate_canvas",
    "generate_id",
    "normalize_heading",
    "make_relative_path",
    "canvas_to_json",
    "write_canvas",
    "canvas_from_dict",
    "load_canvas",
    "write_canvas_preview_html",
    "render_canvas_overview",
    "build_xmind",
    "load_xmind_topic_titles",
    "load_xmind_parent_child_pairs",
]
