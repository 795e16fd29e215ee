"""Notes: locate Markdown documents under a folder."""
from .scan import MARKDOWN_EXTENSION, find_markdown_files

__all__ = [
    "MARKDOWN_EXTENSION",
    "find_markdown_files",
]
