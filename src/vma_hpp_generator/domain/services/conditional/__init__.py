#!/usr/bin/env python3

"""Preprocessor conditional tracking."""

from .guard_cursor import FLUSH, GuardCursor
from .range_tree import BranchRange, ConditionalTree, DirectiveGroup, build_tree

__all__ = [
    "FLUSH",
    "BranchRange",
    "ConditionalTree",
    "DirectiveGroup",
    "GuardCursor",
    "build_tree",
]
