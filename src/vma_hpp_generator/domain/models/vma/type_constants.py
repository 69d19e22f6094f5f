#!/usr/bin/env python3

"""Type naming constants for the C-to-C++ mapping.

Types prefixed with ``Vk`` move into the Vulkan-Hpp namespace, types prefixed
with ``Vma`` only lose their prefix (they are emitted inside the VMA namespace).
"""

VULKAN_PREFIX = "Vk"
C_PREFIX = "Vma"
CPP_NAMESPACE = "VULKAN_HPP_NAMESPACE::"

# Primitive type names: never treated as optional outputs
PRIMITIVE_TYPE_NAMES = frozenset(
    {
        "void",
        "char",
        "uint32_t",
        "size_t",
    }
)
