#!/usr/bin/env python3

"""State shared by the generation passes of one run."""

from dataclasses import dataclass, field

from ....infrastructure.logging import ProgressTracker
from ...models.vma import HandleType
from ..conditional import ConditionalTree, GuardCursor


@dataclass
class GenerationContext:
    """Source text, its conditional tree and what earlier passes discovered.

    Handles are keyed by their C name (``VmaAllocator``) and kept in discovery
    order; struct names are recorded by the struct pass for forward declarations.
    """

    source: str
    tree: ConditionalTree
    handles: dict[str, HandleType] = field(default_factory=dict)
    struct_names: list[str] = field(default_factory=list)
    tracker: ProgressTracker | None = None

    def new_cursor(self) -> GuardCursor:
        return GuardCursor(self.tree)

    def register_handle(self, name: str, dispatchable: bool) -> HandleType:
        handle = HandleType(name=name, dispatchable=dispatchable, cursor=self.new_cursor())
        self.handles[handle.c_name] = handle
        return handle

    def count(self, kind: str) -> None:
        if self.tracker is not None:
            self.tracker.count_declaration(kind)
