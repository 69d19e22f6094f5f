#!/usr/bin/env python3

"""Hand-written size expressions for sequence outputs.

A ``VMA_LEN_IF_NOT_NULL`` annotation usually names another parameter. The few
that name something else need a C++ expression written by hand, keyed by
(C function name, annotation text). Keep this table explicit: there is no
general rule behind these entries.
"""

from ...exceptions import UnresolvableLengthError

LENGTH_OVERRIDES: dict[tuple[str, str], str] = {
    (
        "vmaGetHeapBudgets",
        '"VkPhysicalDeviceMemoryProperties::memoryHeapCount"',
    ): "getMemoryProperties()->memoryHeapCount",
}


def resolve_length_override(function_name: str, length: str) -> str:
    """Look up the size expression for an annotation naming no parameter.

    Raises:
        UnresolvableLengthError: If no override exists
    """
    expression = LENGTH_OVERRIDES.get((function_name, length.strip()))
    if expression is None:
        raise UnresolvableLengthError(
            f"Don't know how to deduce vector size: {length} in {function_name}"
        )
    return expression
