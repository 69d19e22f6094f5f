#!/usr/bin/env python3

"""Function model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .param_descriptor import ParamDescriptor
from .type_constants import CPP_NAMESPACE

if TYPE_CHECKING:
    from .handle_type import HandleType


class ReturnKind(Enum):
    """Return kinds of exported functions, keyed by their C spelling."""

    VOID = "void"
    BOOL32 = "VkBool32"
    RESULT = "VkResult"

    @property
    def cpp_type(self) -> str:
        if self is ReturnKind.VOID:
            return "void"
        if self is ReturnKind.BOOL32:
            return CPP_NAMESPACE + "Bool32"
        return CPP_NAMESPACE + "Result"


@dataclass
class FunctionDescriptor:
    """A normalized exported function.

    ``params`` excludes the handle parameter of bound methods. ``outputs`` and
    ``defaulted_outputs`` hold parameter indices; ``array_by_length`` maps a
    length parameter index to the input array parameter it measures, and
    ``output_length`` is the C++ size expression of a sequence output.
    """

    c_name: str
    method_name: str
    return_kind: ReturnKind
    params: list[ParamDescriptor]
    handle: HandleType | None = None
    position: int = 0
    outputs: list[int] = field(default_factory=list)
    defaulted_outputs: list[int] = field(default_factory=list)
    array_by_length: dict[int, int] = field(default_factory=dict)
    output_length: str | None = None

    def param_index(self, name: str) -> int | None:
        """Index of the visible parameter with the given C name."""
        for index, param in enumerate(self.params):
            if param.name == name:
                return index
        return None
