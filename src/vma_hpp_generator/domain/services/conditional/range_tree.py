#!/usr/bin/env python3

"""Tree of preprocessor conditionals.

A header is modelled as alternating levels of directive groups (one
``#if ... #endif`` family) and branch ranges (one arm of that family). The tree
lets generated code be wrapped in exactly the guards that enclosed the original
declaration, even when declarations are emitted out of source order.
"""

from __future__ import annotations

import re
import weakref

from ....infrastructure.logging import get_logger, log_timing
from ...exceptions import MalformedGuardError

logger = get_logger(__name__)

_DIRECTIVE = re.compile(
    r"^[ \t]*#[ \t]*(?P<directive>(?P<keyword>ifdef|ifndef|if|elif|else|endif)\b.*)$",
    re.MULTILINE | re.IGNORECASE,
)
_OPENING = ("if", "ifdef", "ifndef")
_ALTERNATIVE = ("elif", "else")


class DirectiveGroup:
    """One ``#if`` / ``#elif`` / ``#else`` / ``#endif`` family."""

    def __init__(self, parent: BranchRange | None, start: int):
        self._parent = weakref.ref(parent) if parent is not None else None
        self.start = start
        self.end = start
        self.ranges: list[BranchRange] = []
        self.suppressed = False
        if parent is not None:
            parent.children.append(self)

    @property
    def parent(self) -> BranchRange | None:
        return self._parent() if self._parent is not None else None

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def go_to(self, out: list[str], index: int, from_range: int) -> BranchRange | None:
        """Scan arms starting at ``from_range`` for ``index``, leaving upward if none holds it."""
        for branch in self.ranges[from_range:]:
            if not self.suppressed:
                out.append(f"\n#{branch.text}")
            if branch.contains(index):
                return branch.go_to(out, index)

        parent = self.parent
        if parent is None:
            return None
        if not self.suppressed:
            out.append("\n#endif")
        return parent.go_to(out, index)

    def suppress_levels(self, levels: int) -> None:
        """Mark this group and ``levels - 1`` nested levels below it as suppressed."""
        if levels == 0:
            return
        self.suppressed = True
        if levels == 1:
            return
        for branch in self.ranges:
            for group in branch.children:
                group.suppress_levels(levels - 1)


class BranchRange:
    """A single arm of a directive group, e.g. ``#elif X`` up to the next directive."""

    def __init__(self, group: DirectiveGroup, start: int, text: str | None):
        self._group = weakref.ref(group)
        self.start = start
        self.end = start
        self.text = text
        self.children: list[DirectiveGroup] = []
        self.index = len(group.ranges)
        group.ranges.append(self)

    @property
    def group(self) -> DirectiveGroup:
        group = self._group()
        assert group is not None, "branch range outlived its directive group"
        return group

    def contains(self, index: int) -> bool:
        return self.start <= index < self.end

    def go_to(self, out: list[str], index: int) -> BranchRange | None:
        """Move to the deepest range holding ``index``, appending directives to ``out``.

        Args:
            out: Receives the directive lines passed on the way
            index: Target offset in the source text

        Returns:
            The range now holding ``index``, or None when it lies outside the tree
        """
        if self.contains(index):
            for group in self.children:
                if group.contains(index):
                    return group.go_to(out, index, 0)
            return self
        return self.group.go_to(out, index, self.index + 1)


class ConditionalTree:
    """Owner of a directive tree built from one source text."""

    def __init__(self, length: int):
        self.root_group = DirectiveGroup(None, 0)
        self.root = BranchRange(self.root_group, 0, None)
        self.root_group.end = self.root.end = length

    def iter_groups(self):
        """Yield every real directive group depth-first, in source order."""
        stack = list(reversed(self.root.children))
        while stack:
            group = stack.pop()
            yield group
            for branch in reversed(group.ranges):
                stack.extend(reversed(branch.children))


@log_timing
def build_tree(text: str, skip_levels: int) -> ConditionalTree:
    """Parse preprocessor conditionals in ``text`` into a tree.

    Args:
        text: Comment-free source text
        skip_levels: Number of outermost levels whose directives are never
            emitted (at least the include guard)

    Returns:
        Tree whose root range spans the whole text

    Raises:
        MalformedGuardError: If conditionals are unbalanced
    """
    tree = ConditionalTree(len(text))
    head = tree.root

    for match in _DIRECTIVE.finditer(text):
        keyword = match.group("keyword").lower()
        directive = match.group("directive").rstrip()
        start = match.start()

        if keyword in _OPENING:
            group = DirectiveGroup(head, start)
            head = BranchRange(group, start, directive)
        elif keyword in _ALTERNATIVE:
            if head is tree.root:
                raise MalformedGuardError(f"#{directive} without #if at offset {start}")
            if head.text is not None and head.text.lower().startswith("else"):
                raise MalformedGuardError(f"#{directive} after #else at offset {start}")
            head.end = start
            head = BranchRange(head.group, start, directive)
        else:
            if head is tree.root:
                raise MalformedGuardError(f"#endif without #if at offset {start}")
            group = head.group
            head.end = start
            group.end = start
            parent = group.parent
            assert parent is not None
            head = parent

    if head is not tree.root:
        raise MalformedGuardError(f"Unclosed #{head.text} at offset {head.start}")

    tree.root_group.suppress_levels(skip_levels + 1)
    logger.debug(f"Built conditional tree with {sum(1 for _ in tree.iter_groups())} groups")
    return tree
