"""Tests for the VMA domain models."""

import pytest

from vma_hpp_generator.domain.models.vma import (
    EnumEntry,
    FunctionDescriptor,
    NullTag,
    ParamDescriptor,
    ReturnKind,
)
from vma_hpp_generator.domain.services.conditional import build_tree
from vma_hpp_generator.domain.services.generation import GenerationContext


def make_param(name: str, type_name: str = "void*", length: str | None = None) -> ParamDescriptor:
    return ParamDescriptor(
        original_type=type_name,
        constant=False,
        type=type_name,
        pointer=type_name.endswith("*"),
        tag=NullTag.NONE,
        length=length,
        primitive=True,
        name=name,
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "pretty"),
    [
        ("pUserData", "userData"),
        ("ppData", "data"),
        ("pool", "pool"),
        ("priority", "priority"),
        ("p", "p"),
    ],
)
def test_pretty_name(name: str, pretty: str) -> None:
    assert make_param(name).pretty_name == pretty


@pytest.mark.unit
def test_template_fields() -> None:
    param = make_param("pUserData")
    fields = ParamDescriptor.TEMPLATE_FIELDS
    assert fields["capitalName"](param) == "PUserData"
    assert fields["prettyName"](param) == "userData"
    assert EnumEntry.TEMPLATE_FIELDS["originalName"](EnumEntry("Auto", "VMA_AUTO")) == "VMA_AUTO"


@pytest.mark.unit
def test_length_name_strips_quotes() -> None:
    assert make_param("pData", length='"Vk::count"').length_name == "Vk::count"
    assert make_param("pData").length_name is None


@pytest.mark.unit
def test_return_kind_cpp_types() -> None:
    assert ReturnKind("void").cpp_type == "void"
    assert ReturnKind("VkBool32").cpp_type == "VULKAN_HPP_NAMESPACE::Bool32"
    assert ReturnKind("VkResult").cpp_type == "VULKAN_HPP_NAMESPACE::Result"


@pytest.mark.unit
def test_handle_names() -> None:
    context = GenerationContext(source="", tree=build_tree("", 0))
    handle = context.register_handle("VirtualBlock", False)
    assert handle.c_name == "VmaVirtualBlock"
    assert handle.lower_name == "virtualBlock"
    assert context.handles == {"VmaVirtualBlock": handle}


@pytest.mark.unit
def test_function_param_index() -> None:
    descriptor = FunctionDescriptor(
        c_name="vmaMapMemory",
        method_name="mapMemory",
        return_kind=ReturnKind.RESULT,
        params=[make_param("allocation", "Allocation"), make_param("ppData", "void**")],
    )
    assert descriptor.param_index("ppData") == 1
    assert descriptor.param_index("missing") is None
