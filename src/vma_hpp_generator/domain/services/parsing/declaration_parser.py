#!/usr/bin/env python3

"""Declaration recognizers.

Only the declaration shapes that occur in ``vk_mem_alloc.h`` are recognized:
``typedef enum``, ``typedef struct``, ``VK_DEFINE_*HANDLE`` and exported
``VMA_CALL_PRE ... VMA_CALL_POST`` prototypes. Parameters and struct fields
share one recognizer that understands the nullability and length annotations.
"""

import re

from ....infrastructure.logging import get_logger
from ...exceptions import UnrecognizedDeclarationError
from ...models.vma import (
    C_PREFIX,
    CPP_NAMESPACE,
    PRIMITIVE_TYPE_NAMES,
    VULKAN_PREFIX,
    EnumEntry,
    NullTag,
    ParamDescriptor,
)

logger = get_logger(__name__)

ENUM_PATTERN = re.compile(r"typedef\s+enum\s+Vma(\w+)")
STRUCT_PATTERN = re.compile(r"typedef\s+struct\s+Vma(\w+)")
HANDLE_PATTERN = re.compile(r"VK_DEFINE_(NON_DISPATCHABLE_)?HANDLE\s*\(\s*Vma(\w+)\s*\)")
FUNCTION_PATTERN = re.compile(
    r"VMA_CALL_PRE\s+(\w+)\s+VMA_CALL_POST\s+vma(\w+)\s*(\([\s\S]+?\)\s*;)"
)

_ENUM_MEMBER = re.compile(r"^[ \t]*(VMA_\w+)[^,}]*", re.MULTILINE)
_NULL_TAG = r"(?:\s+VMA_(NULLABLE|NOT_NULL)(?:_NON_DISPATCHABLE)?)?"

PARAM_PATTERN = re.compile(
    r"(const\s+)?(\w+)"
    r"(\s*\*)?" + _NULL_TAG
    + r"(\s*\*)?" + _NULL_TAG
    + r"(?:\s+VMA_LEN_IF_NOT_NULL\(\s*([^)]+?)\s*\))?"
    r"\s+(\w+)"
    r"((?:\s*\[\w+\])+)?"
    r"\s*[;,)]"
)
_DIMENSION = re.compile(r"\[\s*(\w+)\s*\]")


def declaration_body(text: str, start: int) -> str:
    """Text from ``start`` up to (excluding) the next closing brace."""
    end = text.find("}", start)
    return text[start:] if end == -1 else text[start:end]


def upper_snake_to_pascal(value: str) -> str:
    """``VMA_MEMORY_USAGE_GPU_ONLY`` -> ``VmaMemoryUsageGpuOnly``."""
    return "".join(token[:1].upper() + token[1:].lower() for token in value.split("_"))


def parse_enum_members(name: str, body: str, body_offset: int) -> list[tuple[EnumEntry, int]]:
    """Extract enum members from an enum body.

    Members are converted to PascalCase without the enum's own prefix. For
    ``FlagBits`` enums only ``*_BIT`` members are kept, without the suffix.
    Parsing stops at the ``*_MAX_ENUM`` sentinel.

    Args:
        name: Enum name without the ``Vma`` prefix, e.g. ``MemoryUsage``
        body: Text of the enum body
        body_offset: Offset of ``body`` in the source text

    Returns:
        (entry, source offset) pairs in declaration order
    """
    flag_bits = name.endswith("FlagBits")
    # "Vma" + name without "FlagBits" for flags, "Vma" + name otherwise
    prefix_length = len(C_PREFIX) + (len(name) - len("FlagBits") if flag_bits else len(name))

    members: list[tuple[EnumEntry, int]] = []
    for match in _ENUM_MEMBER.finditer(body):
        value = match.group(1)
        if value.endswith("_MAX_ENUM"):
            break
        if flag_bits and not value.endswith("_BIT"):
            continue
        member = upper_snake_to_pascal(value)[prefix_length:]
        if flag_bits:
            member = member[: -len("Bit")]
        members.append((EnumEntry(member, value), body_offset + match.start()))
    return members


def flags_name(flag_bits_name: str) -> str:
    """``AllocationCreateFlagBits`` -> ``AllocationCreateFlags``."""
    return flag_bits_name[: -len("Bits")] + "s"


def _rename_type(original: str) -> str:
    if original.startswith(VULKAN_PREFIX):
        return CPP_NAMESPACE + original[len(VULKAN_PREFIX):]
    if original.startswith(C_PREFIX):
        return original[len(C_PREFIX):]
    return original


def _apply_qualifiers(type_name: str, constant: bool, pointer1: bool, pointer2: bool) -> str:
    if constant:
        type_name = "const " + type_name
    if pointer1:
        type_name += "*"
    if pointer2:
        type_name += "*"
    return type_name


def parse_param(match: re.Match[str]) -> ParamDescriptor:
    """Build a descriptor from a ``PARAM_PATTERN`` match."""
    original_type = match.group(2)
    type_name = _rename_type(original_type)
    primitive = type_name in PRIMITIVE_TYPE_NAMES

    constant = match.group(1) is not None
    pointer1 = match.group(3) is not None
    pointer2 = match.group(5) is not None
    type_name = _apply_qualifiers(type_name, constant, pointer1, pointer2)
    original_type = _apply_qualifiers(original_type, constant, pointer1, pointer2)

    # With two stars only the annotation after the second one counts
    raw_tag = match.group(6) if pointer2 else match.group(4)
    tag = NullTag(raw_tag) if raw_tag is not None else NullTag.NONE

    dimensions = tuple(_DIMENSION.findall(match.group(9) or ""))
    for dimension in reversed(dimensions):
        type_name = f"std::array<{type_name}, {dimension}>"

    if pointer1 and pointer2:
        # Double pointer: the first level is never const
        constant = False

    return ParamDescriptor(
        original_type=original_type,
        constant=constant,
        type=type_name,
        pointer=pointer1 or pointer2,
        tag=tag,
        length=match.group(7),
        primitive=primitive,
        name=match.group(8),
        dimensions=dimensions,
    )


def parse_fields(body: str, body_offset: int) -> list[tuple[ParamDescriptor, int]]:
    """Parse struct fields; unrecognized lines are skipped.

    Returns:
        (field, source offset) pairs in declaration order
    """
    return [
        (parse_param(match), body_offset + match.start())
        for match in PARAM_PATTERN.finditer(body)
    ]


def _split_parameter_slots(param_list: str) -> list[str]:
    """Split the inside of a parameter list on top-level commas."""
    slots: list[str] = []
    depth = 0
    current: list[str] = []
    for char in param_list:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            slots.append("".join(current))
            current = []
            continue
        current.append(char)
    slots.append("".join(current))
    return [slot.strip() for slot in slots if slot.strip()]


def parse_function_params(function_name: str, param_list: str) -> list[ParamDescriptor]:
    """Parse a parenthesized parameter list, terminated by ``;``.

    Args:
        function_name: C function name, for error messages
        param_list: Text from the opening parenthesis to the final semicolon

    Returns:
        Parameters in declaration order

    Raises:
        UnrecognizedDeclarationError: If any parameter cannot be recognized
    """
    inner = param_list[param_list.index("(") + 1 : param_list.rindex(")")]
    slots = _split_parameter_slots(inner)
    if slots == ["void"]:
        slots = []

    params = [parse_param(match) for match in PARAM_PATTERN.finditer(param_list)]
    if len(params) != len(slots):
        raise UnrecognizedDeclarationError(
            f"Cannot parse parameters of {function_name}: recognized {len(params)} "
            f"of {len(slots)} ({', '.join(slots)})"
        )

    logger.debug(f"Parsed {len(params)} parameters of {function_name}")
    return params
