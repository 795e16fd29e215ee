"""
Load .env from project root; expose NOTES_DIR, CANVAS_HEADINGS, CANVAS_* geometry.
Call load_env() before using in main or other modules.
"""
from __future__ import annotations

import os
from pathlib import Path

DEFAULT_NODE_WIDTH = 400
DEFAULT_NODE_HEIGHT = 420
DEFAULT_SPACING_X = 20
DEFAULT_SPACING_Y = 20


def _project_root() -> Path:
    """Project root (directory containing main.py, src/)."""
    p = Path(__file__).resolve()
    # src/config/config.py -> two levels up
    for _ in range(3):
        p = p.parent
        if (p / "main.py").is_file() or (p / "src").is_dir():
            return p
    return Path.cwd()


def load_env() -> None:
    """Load env vars from project root .env if present."""
    root = _project_root()
    env_file = root / ".env"
    if not env_file.is_file():
        return
    for line in env_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, _, v = line.partition("=")
        k, v = k.strip(), v.strip().strip("'\"")
        if k and v:
            os.environ.setdefault(k, v)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def split_headings(raw: str) -> list[str]:
    """Split a comma-separated heading list; trims pieces and drops empty ones."""
    return [h.strip() for h in raw.split(",") if h.strip()]


def get_notes_dir() -> Path | None:
    """Folder to scan when --folder is not given (NOTES_DIR)."""
    load_env()
    notes_dir = os.environ.get("NOTES_DIR")
    if notes_dir:
        return Path(notes_dir)
    return None


def get_default_headings() -> list[str]:
    """Column headings when -H is not given (CANVAS_HEADINGS, comma-separated)."""
    load_env()
    return split_headings(os.environ.get("CANVAS_HEADINGS", ""))


def get_base_path() -> Path | None:
    """Base path for relative file references (CANVAS_BASE_PATH)."""
    load_env()
    base = os.environ.get("CANVAS_BASE_PATH")
    if base:
        return Path(base)
    return None


def get_node_width() -> int:
    """Node width (CANVAS_NODE_WIDTH, default 400)."""
    load_env()
    return _env_int("CANVAS_NODE_WIDTH", DEFAULT_NODE_WIDTH)


def get_node_height() -> int:
    """Node height (CANVAS_NODE_HEIGHT, default 420)."""
    load_env()
    return _env_int("CANVAS_NODE_HEIGHT", DEFAULT_NODE_HEIGHT)


def get_spacing_x() -> int:
    """Horizontal spacing between columns (CANVAS_SPACING_X, default 20)."""
    load_env()
    return _env_int("CANVAS_SPACING_X", DEFAULT_SPACING_X)


def get_spacing_y() -> int:
    """Vertical spacing between rows (CANVAS_SPACING_Y, default 20)."""
    load_env()
    return _env_int("CANVAS_SPACING_Y", DEFAULT_SPACING_Y)
