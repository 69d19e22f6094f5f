#!/usr/bin/env python3

"""Handle model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .type_constants import C_PREFIX

if TYPE_CHECKING:
    from ...services.conditional import GuardCursor


@dataclass
class HandleType:
    """An opaque VMA handle and the methods bound to it.

    Declarations and definitions accumulate over the whole handle pass; the
    cursor tracks which guards are open in those two streams.
    """

    name: str
    dispatchable: bool
    cursor: GuardCursor
    declarations: list[str] = field(default_factory=list)
    definitions: list[str] = field(default_factory=list)

    @property
    def c_name(self) -> str:
        return C_PREFIX + self.name

    @property
    def lower_name(self) -> str:
        return self.name[:1].lower() + self.name[1:]
