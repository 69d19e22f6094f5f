#!/usr/bin/env python3

"""Generation services: C++ wrappers for enums, structs, handles and functions."""

from .enum_generator import EnumGenerator
from .generation_context import GenerationContext
from .handle_generator import HandleGenerator
from .length_overrides import LENGTH_OVERRIDES, resolve_length_override
from .signature_transformer import MethodSignature, SignatureTransformer
from .struct_generator import StructGenerator

__all__ = [
    "EnumGenerator",
    "GenerationContext",
    "HandleGenerator",
    "LENGTH_OVERRIDES",
    "MethodSignature",
    "SignatureTransformer",
    "StructGenerator",
    "resolve_length_override",
]
