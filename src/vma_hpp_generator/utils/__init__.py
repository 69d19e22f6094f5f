"""Utility helpers."""

from .file_utils import write_if_changed
from .text_utils import indent_lines, strip_comments, truncate_at

__all__ = ["indent_lines", "strip_comments", "truncate_at", "write_if_changed"]
