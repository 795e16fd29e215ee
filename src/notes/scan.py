"""
Scan a notes folder for Markdown files; sorted, symlinks followed, unreadable entries skipped.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"


def _walk_error(err: OSError) -> None:
    logger.debug("Skipping unreadable entry: %s", err)


def find_markdown_files(folder: Path | str, extension: str = MARKDOWN_EXTENSION) -> list[Path]:
    """
    Recursively collect regular files under folder whose suffix equals extension.
    Symbolic links are followed. A directory is only pruned when it is the same
    directory (device and inode) as one above it on the current path, so link
    cycles terminate while a directory reachable by two paths is listed under both.
    Sorted by full path string.
    """
    folder = Path(folder)
    if not folder.is_dir():
        return []

    files: list[Path] = []
    # dirpath -> (device, inode) of itself and every directory above it
    ancestors: dict[str, frozenset[tuple[int, int]]] = {}
    for dirpath, dirnames, filenames in os.walk(folder, onerror=_walk_error, followlinks=True):
        try:
            st = os.stat(dirpath)
        except OSError as e:
            _walk_error(e)
            dirnames[:] = []
            continue
        key = (st.st_dev, st.st_ino)
        above = ancestors.get(os.path.dirname(dirpath), frozenset())
        if key in above:
            logger.debug("Skipping symlink loop: %s", dirpath)
            dirnames[:] = []
            continue
        ancestors[dirpath] = above | {key}

        for name in filenames:
            path = Path(dirpath) / name
            if path.suffix != extension:
                continue
            try:
                if not path.is_file():
                    continue
            except OSError:
                continue
            files.append(path)

    files.sort(key=str)
    return files
