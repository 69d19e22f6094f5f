#!/usr/bin/env python3

"""Enum member model."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class EnumEntry:
    """One enum member: C++ member name (without ``e``) and C constant."""

    name: str
    original_name: str

    TEMPLATE_FIELDS: ClassVar[dict[str, Callable[[Any], object]]] = {
        "name": lambda entry: entry.name,
        "originalName": lambda entry: entry.original_name,
    }
