"""Config: load .env, expose NOTES_DIR, CANVAS_HEADINGS, CANVAS_* geometry defaults."""
from .config import (
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

__all__ = [
    "load_env",
    "split_headings",
    "get_notes_dir",
    "get_default_headings",
    "get_base_path",
    "get_node_width",
    "get_node_height",
    "get_spacing_x",
    "get_spacing_y",
]
