#!/usr/bin/env python3

"""Domain services layer."""

from . import conditional, generation, parsing, templating

__all__ = [
    "conditional",
    "generation",
    "parsing",
    "templating",
]
