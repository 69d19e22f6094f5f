#!/usr/bin/env python3

"""Cursor over a conditional tree for one output stream."""

from .range_tree import BranchRange, ConditionalTree

# Offset outside every range: moving there closes all open guards
FLUSH = -1


class GuardCursor:
    """The branch range currently open in an output stream.

    Moves should be made in non-decreasing source order (returning to an
    enclosing range is also fine); ``flush`` closes everything.
    """

    def __init__(self, tree: ConditionalTree):
        self.tree = tree
        self.position: BranchRange = tree.root

    def move_to(self, offset: int) -> str:
        """Move to ``offset`` and return the directive lines needed to get there."""
        out: list[str] = []
        target = self.position.go_to(out, offset)
        self.position = target if target is not None else self.tree.root
        return "".join(out)

    def flush(self) -> str:
        """Close every open guard and return to the root."""
        return self.move_to(FLUSH)
