#!/usr/bin/env python3

"""Regular-expression recognizers for VMA header declarations."""

from .declaration_parser import (
    ENUM_PATTERN,
    FUNCTION_PATTERN,
    HANDLE_PATTERN,
    PARAM_PATTERN,
    STRUCT_PATTERN,
    declaration_body,
    flags_name,
    parse_enum_members,
    parse_fields,
    parse_function_params,
    parse_param,
    upper_snake_to_pascal,
)

__all__ = [
    "ENUM_PATTERN",
    "FUNCTION_PATTERN",
    "HANDLE_PATTERN",
    "PARAM_PATTERN",
    "STRUCT_PATTERN",
    "declaration_body",
    "flags_name",
    "parse_enum_members",
    "parse_fields",
    "parse_function_params",
    "parse_param",
    "upper_snake_to_pascal",
]
