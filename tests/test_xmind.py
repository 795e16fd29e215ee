"""Tests for XMind mind map export of the canvas grid."""
from __future__ import annotations

from pathlib import Path

import pytest

from src.layout import build_xmind, generate_canvas, load_xmind_topic_titles, load_xmind_parent_child_pairs


def test_main_help_shows_xmind() -> None:
    """main.py --help mentions --xmind."""
    import subprocess
    import sys

    result = subprocess.run(
        [sys.executable, "main.py", "--help"],
        cwd=Path(__file__).resolve().parent.parent,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "--xmind" in result.stdout


def test_build_xmind_creates_file(tmp_path: Path) -> None:
    """build_xmind produces a .xmind file with documents and headings as topics."""
    canvas = generate_canvas(["a.md", "b.md"], ["Model", "Data"])
    out = tmp_path / "review.xmind"
    build_xmind(canvas, out, sheet_title="Review")
    assert out.is_file()
    titles = load_xmind_topic_titles(out)
    assert "Review" in titles
    for expected in ("a.md", "b.md", "#Model", "#Data"):
        assert expected in titles


def test_xmind_relationship_validation(tmp_path: Path) -> None:
    """Each document is a child of the root and each heading a child of its document."""
    canvas = generate_canvas(["a.md", "b.md"], ["Model", "Data"])
    out = tmp_path / "validate.xmind"
    build_xmind(canvas, out)

    pairs = set(load_xmind_parent_child_pairs(out))
    expected_pairs = {
        ("Canvas Table", "a.md"),
        ("Canvas Table", "b.md"),
        ("a.md", "#Model"),
        ("a.md", "#Data"),
        ("b.md", "#Model"),
        ("b.md", "#Data"),
    }
    assert expected_pairs.issubset(pairs), f"Expected relationships {expected_pairs} not found in {pairs}"


def test_build_xmind_empty_creates_root_only(tmp_path: Path) -> None:
    """Empty canvas produces xmind with single root (no content)."""
    out = tmp_path / "empty.xmind"
    build_xmind(generate_canvas([], ["A", "B"]), out)
    assert out.is_file()
    titles = load_xmind_topic_titles(out)
    assert "(No content)" in titles
    assert "#A" not in titles
