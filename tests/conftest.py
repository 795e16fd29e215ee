"""Pytest configuration and shared fixtures."""
from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Small notes folder: two papers at top level, one nested, plus non-Markdown noise."""
    root = tmp_path / "notes"
    (root / "sub").mkdir(parents=True)
    (root / "b.md").write_text("# Model\n", encoding="utf-8")
    (root / "a.md").write_text("# Model\n# Data\n", encoding="utf-8")
    (root / "sub" / "c.md").write_text("# Data\n", encoding="utf-8")
    (root / "readme.txt").write_text("not a note", encoding="utf-8")
    (root / "image.MD.png").write_bytes(b"")
    return root


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: 0000000000000000, 0000000000000001, ..."""
    counter = iter(range(1 << 32))
    return lambda: f"{next(counter):016x}"


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Avoid loading project .env in tests unless explicitly set."""
    for key in (
        "NOTES_DIR",
        "CANVAS_HEADINGS",
        "CANVAS_BASE_PATH",
        "CANVAS_NODE_WIDTH",
        "CANVAS_NODE_HEIGHT",
        "CANVAS_SPACING_X",
        "CANVAS_SPACING_Y",
    ):
        monkeypatch.delenv(key, raising=False)
