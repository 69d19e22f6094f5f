"""Tests for the C prototype to C++ method transformation."""

import pytest

from vma_hpp_generator.domain.exceptions import (
    UnrecognizedDeclarationError,
    UnresolvableLengthError,
    UnsupportedSignatureError,
)
from vma_hpp_generator.domain.models.vma import ReturnKind
from vma_hpp_generator.domain.services.conditional import build_tree
from vma_hpp_generator.domain.services.generation import (
    LENGTH_OVERRIDES,
    GenerationContext,
    SignatureTransformer,
    resolve_length_override,
)
from vma_hpp_generator.domain.services.parsing import parse_function_params

HEAP_COUNT = '"VkPhysicalDeviceMemoryProperties::memoryHeapCount"'


@pytest.fixture
def transformer() -> SignatureTransformer:
    context = GenerationContext(source="", tree=build_tree("", 0))
    context.register_handle("Allocator", True)
    context.register_handle("Allocation", False)
    return SignatureTransformer(context.handles)


def describe(transformer: SignatureTransformer, return_name: str, name: str, params: str):
    return transformer.describe(return_name, name, parse_function_params("vma" + name, params))


@pytest.mark.unit
def test_free_function_with_single_output(transformer: SignatureTransformer) -> None:
    """Test that a mandatory output becomes the result value."""
    descriptor = describe(
        transformer,
        "VkResult",
        "CreateAllocator",
        "(const VmaAllocatorCreateInfo* VMA_NOT_NULL pCreateInfo,"
        " VmaAllocator VMA_NULLABLE* VMA_NOT_NULL pAllocator);",
    )
    assert descriptor.handle is None
    assert descriptor.method_name == "createAllocator"
    assert descriptor.return_kind is ReturnKind.RESULT
    assert descriptor.outputs == [1]

    declarations, definitions = transformer.emit(descriptor)
    assert (
        "VULKAN_HPP_NODISCARD_WHEN_NO_EXCEPTIONS typename VULKAN_HPP_NAMESPACE::"
        "ResultValueType<Allocator>::type createAllocator(const AllocatorCreateInfo& createInfo);"
    ) in declarations
    assert "VULKAN_HPP_NODISCARD VULKAN_HPP_NAMESPACE::Result createAllocator(" in declarations
    assert declarations.startswith("\n#ifndef VULKAN_HPP_DISABLE_ENHANCED_MODE\n")
    assert "#else" not in declarations

    assert "  Allocator allocator;\n" in definitions
    assert (
        "vmaCreateAllocator(reinterpret_cast<const VmaAllocatorCreateInfo*>(&createInfo), "
        "reinterpret_cast<VmaAllocator*>(&allocator))"
    ) in definitions
    assert (
        'return createResultValue(result, allocator, VMA_HPP_NAMESPACE_STRING "::createAllocator");'
    ) in definitions


@pytest.mark.unit
def test_destroy_own_handle_is_renamed(transformer: SignatureTransformer) -> None:
    """Test that Destroy<Handle> becomes destroy() and identical forms share one #else."""
    descriptor = describe(
        transformer, "void", "DestroyAllocator", "(VmaAllocator VMA_NULLABLE allocator);"
    )
    assert descriptor.handle is not None
    assert descriptor.handle.name == "Allocator"
    assert descriptor.method_name == "destroy"
    assert descriptor.params == []

    declarations, definitions = transformer.emit(descriptor)
    assert declarations == (
        "\n#ifndef VULKAN_HPP_DISABLE_ENHANCED_MODE\n"
        "void destroy() const;\n"
        "#else\n"
        "void destroy() const;\n"
        "#endif\n"
    )
    assert "VULKAN_HPP_INLINE void Allocator::destroy() const {\n" in definitions
    assert "  vmaDestroyAllocator(m_allocator);\n" in definitions


@pytest.mark.unit
def test_destroy_other_handle_keeps_name(transformer: SignatureTransformer) -> None:
    descriptor = describe(
        transformer,
        "void",
        "FreeMemory",
        "(VmaAllocator VMA_NOT_NULL allocator, const VmaAllocation VMA_NULLABLE allocation);",
    )
    assert descriptor.handle.name == "Allocator"
    assert descriptor.method_name == "freeMemory"


@pytest.mark.unit
def test_input_array_collapses_length(transformer: SignatureTransformer) -> None:
    """Test that a const array and its length become one ArrayProxy."""
    descriptor = describe(
        transformer,
        "void",
        "FreeMemoryPages",
        "(VmaAllocator VMA_NOT_NULL allocator, size_t allocationCount,"
        " const VmaAllocation VMA_NULLABLE* VMA_NOT_NULL"
        " VMA_LEN_IF_NOT_NULL(allocationCount) pAllocations);",
    )
    assert descriptor.array_by_length == {0: 1}
    assert descriptor.outputs == []

    raw, enhanced = transformer.transform(descriptor)
    assert enhanced.param_types == ["VULKAN_HPP_NAMESPACE::ArrayProxy<const Allocation>"]
    assert raw.param_types == ["size_t", "const Allocation*"]

    declarations, definitions = transformer.emit(descriptor)
    assert (
        "void freeMemoryPages(VULKAN_HPP_NAMESPACE::ArrayProxy<const Allocation> allocations) const;"
    ) in declarations
    assert "size_t allocationCount = allocations.size();" in definitions
    assert (
        "vmaFreeMemoryPages(m_allocator, allocationCount, "
        "reinterpret_cast<const VmaAllocation*>(allocations.data()));"
    ) in definitions


@pytest.mark.unit
def test_vector_output_with_override(transformer: SignatureTransformer) -> None:
    """Test sequence outputs sized by a hand-written expression."""
    descriptor = describe(
        transformer,
        "void",
        "GetHeapBudgets",
        f"(VmaAllocator VMA_NOT_NULL allocator,"
        f" VmaBudget* VMA_NOT_NULL VMA_LEN_IF_NOT_NULL({HEAP_COUNT}) pBudgets);",
    )
    assert descriptor.output_length == "getMemoryProperties()->memoryHeapCount"

    raw, enhanced = transformer.transform(descriptor)
    assert enhanced.returns_vector
    assert enhanced.return_type == "std::vector<Budget, VectorAllocator>"
    assert not raw.returns_vector

    declarations, definitions = transformer.emit(descriptor)
    assert "template<typename VectorAllocator = std::allocator<Budget>>\n" in declarations
    assert "getHeapBudgets(VectorAllocator& vectorAllocator) const;" in declarations
    assert "getHeapBudgets() const;" in declarations
    assert "typename B = VectorAllocator" in declarations
    assert (
        "std::vector<Budget, VectorAllocator> budgets(getMemoryProperties()->memoryHeapCount);"
    ) in definitions
    assert (
        "std::vector<Budget, VectorAllocator> budgets("
        "getMemoryProperties()->memoryHeapCount, vectorAllocator);"
    ) in definitions
    assert "return budgets;" in definitions
    # Definitions never repeat default template arguments
    assert "typename B,\n" in definitions
    assert "= VectorAllocator" not in definitions


@pytest.mark.unit
def test_vector_output_sized_by_parameter(transformer: SignatureTransformer) -> None:
    descriptor = describe(
        transformer,
        "void",
        "GetAllocationInfos",
        "(VmaAllocator VMA_NOT_NULL allocator, uint32_t count,"
        " VmaAllocationInfo* VMA_NOT_NULL VMA_LEN_IF_NOT_NULL(count) pInfos);",
    )
    assert descriptor.output_length == "count"
    assert descriptor.array_by_length == {}


@pytest.mark.unit
def test_unresolvable_length(transformer: SignatureTransformer) -> None:
    with pytest.raises(UnresolvableLengthError, match="deduce vector size"):
        describe(
            transformer,
            "void",
            "GetPoolBudgets",
            f"(VmaAllocator VMA_NOT_NULL allocator,"
            f" VmaBudget* VMA_NOT_NULL VMA_LEN_IF_NOT_NULL({HEAP_COUNT}) pBudgets);",
        )


@pytest.mark.unit
def test_pair_output_and_defaulted_optional(transformer: SignatureTransformer) -> None:
    """Test two outputs returned as a pair and a trailing optional output."""
    descriptor = describe(
        transformer,
        "VkResult",
        "CreateBuffer",
        "(VmaAllocator VMA_NOT_NULL allocator,"
        " const VkBufferCreateInfo* VMA_NOT_NULL pBufferCreateInfo,"
        " const VmaAllocationCreateInfo* VMA_NOT_NULL pAllocationCreateInfo,"
        " VkBuffer VMA_NULLABLE_NON_DISPATCHABLE* VMA_NOT_NULL pBuffer,"
        " VmaAllocation VMA_NULLABLE* VMA_NOT_NULL pAllocation,"
        " VmaAllocationInfo* VMA_NULLABLE pAllocationInfo);",
    )
    assert descriptor.outputs == [2, 3]
    assert descriptor.defaulted_outputs == [4]

    raw, enhanced = transformer.transform(descriptor)
    assert enhanced.return_type == "std::pair<VULKAN_HPP_NAMESPACE::Buffer, Allocation>"
    assert enhanced.param_types == [
        "const VULKAN_HPP_NAMESPACE::BufferCreateInfo&",
        "const AllocationCreateInfo&",
        "VULKAN_HPP_NAMESPACE::Optional<AllocationInfo>",
    ]

    declarations, definitions = transformer.emit(descriptor)
    assert "VULKAN_HPP_NAMESPACE::Optional<AllocationInfo> allocationInfo = nullptr" in declarations
    assert "= nullptr" not in definitions
    assert "VULKAN_HPP_NAMESPACE::Buffer& buffer = pair.first;" in definitions
    assert "Allocation& allocation = pair.second;" in definitions
    assert (
        "reinterpret_cast<VmaAllocationInfo*>(static_cast<AllocationInfo*>(allocationInfo))"
    ) in definitions
    assert (
        'return createResultValue(result, pair, VMA_HPP_NAMESPACE_STRING "::Allocator::createBuffer");'
    ) in definitions


@pytest.mark.unit
def test_defaulted_outputs_only_trailing(transformer: SignatureTransformer) -> None:
    """Test that an optional output followed by a plain parameter gets no default."""
    descriptor = describe(
        transformer,
        "void",
        "Query",
        "(VmaAllocator VMA_NOT_NULL allocator,"
        " VmaAllocationInfo* VMA_NULLABLE pInfo, uint32_t flags);",
    )
    assert descriptor.defaulted_outputs == []


@pytest.mark.unit
def test_bool_return_without_outputs(transformer: SignatureTransformer) -> None:
    descriptor = describe(
        transformer,
        "VkBool32",
        "IsEnabled",
        "(VmaAllocator VMA_NOT_NULL allocator);",
    )
    raw, enhanced = transformer.transform(descriptor)
    assert enhanced.return_type == "VULKAN_HPP_NAMESPACE::Bool32"
    _, definitions = transformer.emit(descriptor)
    assert "return result;" in definitions


@pytest.mark.unit
def test_three_outputs_rejected(transformer: SignatureTransformer) -> None:
    with pytest.raises(UnsupportedSignatureError, match="3\\+"):
        describe(
            transformer,
            "VkResult",
            "CreateThree",
            "(VmaAllocator VMA_NOT_NULL allocator,"
            " uint32_t* VMA_NOT_NULL pA, uint32_t* VMA_NOT_NULL pB, uint32_t* VMA_NOT_NULL pC);",
        )


@pytest.mark.unit
def test_return_value_with_output_rejected(transformer: SignatureTransformer) -> None:
    with pytest.raises(UnsupportedSignatureError, match="return value"):
        describe(
            transformer,
            "VkBool32",
            "Check",
            "(VmaAllocator VMA_NOT_NULL allocator, uint32_t* VMA_NOT_NULL pValue);",
        )


@pytest.mark.unit
def test_two_outputs_with_array_rejected(transformer: SignatureTransformer) -> None:
    with pytest.raises(UnsupportedSignatureError, match="array"):
        describe(
            transformer,
            "void",
            "Mixed",
            "(VmaAllocator VMA_NOT_NULL allocator, uint32_t count,"
            " uint32_t* VMA_NOT_NULL pValue,"
            " VmaBudget* VMA_NOT_NULL VMA_LEN_IF_NOT_NULL(count) pBudgets);",
        )


@pytest.mark.unit
def test_unknown_return_type(transformer: SignatureTransformer) -> None:
    with pytest.raises(UnrecognizedDeclarationError, match="uint64_t"):
        describe(transformer, "uint64_t", "Count", "(VmaAllocator VMA_NOT_NULL allocator);")


@pytest.mark.unit
def test_length_override_table() -> None:
    assert ("vmaGetHeapBudgets", HEAP_COUNT) in LENGTH_OVERRIDES
    assert resolve_length_override("vmaGetHeapBudgets", f" {HEAP_COUNT} ") == (
        "getMemoryProperties()->memoryHeapCount"
    )
    with pytest.raises(UnresolvableLengthError):
        resolve_length_override("vmaGetHeapBudgets", "heapCount")
