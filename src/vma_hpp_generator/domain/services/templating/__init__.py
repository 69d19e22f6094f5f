#!/usr/bin/env python3

"""Text templates with positional placeholders and guarded repeated blocks."""

from .template_engine import TemplateEntry, render, render_entries

__all__ = [
    "TemplateEntry",
    "render",
    "render_entries",
]
