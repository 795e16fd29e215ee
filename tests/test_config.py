"""Tests for src.config."""
from __future__ import annotations

from pathlib import Path

import pytest


def test_get_notes_dir_default(monkeypatch) -> None:
    """Without NOTES_DIR, get_notes_dir returns None."""
    monkeypatch.setattr("src.config.config.load_env", lambda: None)
    from src.config import get_notes_dir

    assert get_notes_dir() is None


def test_get_notes_dir_from_env(monkeypatch, tmp_path: Path) -> None:
    """With NOTES_DIR set, get_notes_dir returns that path."""
    monkeypatch.setenv("NOTES_DIR", str(tmp_path / "papers"))
    from src.config import get_notes_dir

    assert get_notes_dir() == tmp_path / "papers"


def test_geometry_defaults(monkeypatch) -> None:
    """Without CANVAS_* vars, geometry falls back to 400/420/20/20."""
    monkeypatch.setattr("src.config.config.load_env", lambda: None)
    from src.config import get_node_width, get_node_height, get_spacing_x, get_spacing_y

    assert get_node_width() == 400
    assert get_node_height() == 420
    assert get_spacing_x() == 20
    assert get_spacing_y() == 20


def test_geometry_from_env(monkeypatch) -> None:
    """CANVAS_* vars override the defaults, negatives included."""
    monkeypatch.setenv("CANVAS_NODE_WIDTH", "300")
    monkeypatch.setenv("CANVAS_NODE_HEIGHT", " 200 ")
    monkeypatch.setenv("CANVAS_SPACING_X", "-10")
    monkeypatch.setenv("CANVAS_SPACING_Y", "0")
    from src.config import get_node_width, get_node_height, get_spacing_x, get_spacing_y

    assert get_node_width() == 300
    assert get_node_height() == 200
    assert get_spacing_x() == -10
    assert get_spacing_y() == 0


def test_geometry_invalid_env_raises(monkeypatch) -> None:
    monkeypatch.setenv("CANVAS_NODE_WIDTH", "wide")
    from src.config import get_node_width

    with pytest.raises(ValueError, match="CANVAS_NODE_WIDTH"):
        get_node_width()


def test_default_headings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CANVAS_HEADINGS", "Model, Data,,#Metrics")
    from src.config import get_default_headings

    assert get_default_headings() == ["Model", "Data", "#Metrics"]


def test_split_headings_keeps_duplicates() -> None:
    from src.config import split_headings

    assert split_headings("A,B,A") == ["A", "B", "A"]
    assert split_headings("") == []
    assert split_headings(" , ") == []


def test_get_base_path(monkeypatch, tmp_path: Path) -> None:
    from src.config import get_base_path

    monkeypatch.setattr("src.config.config.load_env", lambda: None)
    assert get_base_path() is None
    monkeypatch.setenv("CANVAS_BASE_PATH", str(tmp_path))
    assert get_base_path() == tmp_path


def test_load_env_does_not_override(monkeypatch, tmp_path: Path) -> None:
    """load_env reads .env from the project root without overriding existing values."""
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\nNOTES_DIR='/from/dotenv'\nCANVAS_SPACING_X=5\nnot a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setattr("src.config.config._project_root", lambda: tmp_path)
    # record NOTES_DIR as unset so load_env's value is removed after the test
    monkeypatch.setenv("NOTES_DIR", "placeholder")
    monkeypatch.delenv("NOTES_DIR")
    monkeypatch.setenv("CANVAS_SPACING_X", "7")
    from src.config.config import load_env
    import os

    load_env()
    assert os.environ["NOTES_DIR"] == "/from/dotenv"
    assert os.environ["CANVAS_SPACING_X"] == "7"
