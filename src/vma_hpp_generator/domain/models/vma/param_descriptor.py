#!/usr/bin/env python3

"""Parameter / struct field model."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

_POINTER_NAME = re.compile(r"p+([A-Z])(\w+)")


class NullTag(Enum):
    """Nullability annotation attached to a pointer."""

    NONE = "NONE"
    NULLABLE = "NULLABLE"
    NOT_NULL = "NOT_NULL"


@dataclass(frozen=True)
class ParamDescriptor:
    """A parsed function parameter or struct field.

    ``type`` is the C++ spelling (renamed, with const/pointers/arrays applied),
    ``original_type`` the C spelling with const and pointers but no arrays.
    """

    original_type: str
    constant: bool
    type: str
    pointer: bool
    tag: NullTag
    length: str | None
    primitive: bool
    name: str
    dimensions: tuple[str, ...] = ()

    TEMPLATE_FIELDS: ClassVar[dict[str, Callable[[Any], object]]] = {
        "type": lambda param: param.type,
        "name": lambda param: param.name,
        "capitalName": lambda param: param.capital_name,
        "prettyName": lambda param: param.pretty_name,
    }

    @property
    def capital_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def pretty_name(self) -> str:
        """Name without the Hungarian pointer prefix: ``ppData`` -> ``data``."""
        match = _POINTER_NAME.fullmatch(self.name)
        if match is None:
            return self.name
        return match.group(1).lower() + match.group(2)

    @property
    def length_name(self) -> str | None:
        """Length annotation as a parameter name (quotes removed)."""
        if self.length is None:
            return None
        return self.length.strip().strip('"')

    def strip_pointer(self) -> str:
        """C++ type with the outermost pointer removed."""
        return self.type[:-1]
