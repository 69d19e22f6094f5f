#!/usr/bin/env python3

"""Declaration models for the VMA C header."""

from .enum_entry import EnumEntry
from .function_descriptor import FunctionDescriptor, ReturnKind
from .handle_type import HandleType
from .param_descriptor import NullTag, ParamDescriptor
from .type_constants import (
    C_PREFIX,
    CPP_NAMESPACE,
    PRIMITIVE_TYPE_NAMES,
    VULKAN_PREFIX,
)

__all__ = [
    "C_PREFIX",
    "CPP_NAMESPACE",
    "EnumEntry",
    "FunctionDescriptor",
    "HandleType",
    "NullTag",
    "ParamDescriptor",
    "PRIMITIVE_TYPE_NAMES",
    "ReturnKind",
    "VULKAN_PREFIX",
]
