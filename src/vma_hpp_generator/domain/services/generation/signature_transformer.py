#!/usr/bin/env python3

"""Function prototype to C++ method transformation.

Every exported function yields two C++ forms:

- raw: all parameters kept, arguments cast back to the C types, the C return
  kind returned as is;
- enhanced: outputs become return values, input arrays and their lengths
  collapse into one ``ArrayProxy``, not-null pointers become references,
  optional outputs become ``Optional`` and result codes go through
  ``createResultValue``.
"""

from ....infrastructure.logging import get_logger
from ...exceptions import UnrecognizedDeclarationError, UnsupportedSignatureError
from ...models.vma import (
    CPP_NAMESPACE,
    FunctionDescriptor,
    HandleType,
    NullTag,
    ParamDescriptor,
    ReturnKind,
)
from ..templating import render
from ..templating.templates import FUNCTION_BODY, FUNCTION_SIGNATURE
from .length_overrides import resolve_length_override

logger = get_logger(__name__)

ENHANCED_MODE_GUARD = "#ifndef VULKAN_HPP_DISABLE_ENHANCED_MODE"
FUNCTION_PREFIX = "vma"


class MethodSignature:
    """One C++ form (raw or enhanced) of an exported function."""

    def __init__(self, descriptor: FunctionDescriptor, enhanced: bool):
        self.descriptor = descriptor
        self.enhanced = enhanced
        self.param_types: list[str] = []
        self.param_indices: list[int] = []
        self.arguments: list[str] = []

        if descriptor.handle is not None:
            self.arguments.append(f"m_{descriptor.handle.lower_name}")

        for index, param in enumerate(descriptor.params):
            self.arguments.append(self._argument(index, param))
            if enhanced and (index in descriptor.outputs or index in descriptor.array_by_length):
                continue
            self.param_types.append(self._param_type(param))
            self.param_indices.append(index)

    def _argument(self, index: int, param: ParamDescriptor) -> str:
        """Expression passing ``param`` to the C function."""
        value = param.pretty_name
        if self.enhanced and param.pointer:
            if param.length is not None:
                value += ".data()"
            elif param.tag is NullTag.NOT_NULL or index in self.descriptor.outputs:
                value = "&" + value
            elif not param.constant and not param.primitive and param.type != param.original_type:
                value = f"static_cast<{param.type}>({value})"

        if param.type == param.original_type:
            return value
        if param.pointer:
            return f"reinterpret_cast<{param.original_type}>({value})"
        return f"static_cast<{param.original_type}>({value})"

    def _param_type(self, param: ParamDescriptor) -> str:
        if not (self.enhanced and param.pointer):
            return param.type
        if param.length is not None:
            proxy = "ArrayProxy" if param.constant else "ArrayProxyNoTemporaries"
            return f"{CPP_NAMESPACE}{proxy}<{param.strip_pointer()}>"
        if param.tag is NullTag.NOT_NULL:
            return param.strip_pointer() + "&"
        if not param.constant and not param.primitive:
            return f"{CPP_NAMESPACE}Optional<{param.strip_pointer()}>"
        return param.type

    @property
    def _outputs(self) -> list[ParamDescriptor]:
        return [self.descriptor.params[index] for index in self.descriptor.outputs]

    @property
    def returns_vector(self) -> bool:
        """Whether the enhanced form returns a freshly allocated sequence."""
        outputs = self._outputs
        return self.enhanced and len(outputs) == 1 and outputs[0].length is not None

    @property
    def return_type(self) -> str:
        kind = self.descriptor.return_kind
        if not self.enhanced:
            return kind.cpp_type

        outputs = self._outputs
        if len(outputs) == 2:
            return f"std::pair<{outputs[0].strip_pointer()}, {outputs[1].strip_pointer()}>"
        if len(outputs) == 1:
            element = outputs[0].strip_pointer()
            if outputs[0].length is not None:
                return f"std::vector<{element}, VectorAllocator>"
            return element
        return "void" if kind is ReturnKind.RESULT else kind.cpp_type

    def generate(self, definition: bool, custom_allocator: bool = False) -> str:
        """Render the declaration or the definition of this form.

        Sequence-returning enhanced forms render two overloads: one taking a
        ``VectorAllocator&`` and one using ``std::allocator``.

        Args:
            definition: Render an inline definition instead of a declaration
            custom_allocator: Render the overload taking a vector allocator

        Returns:
            C++ source text ending with a newline
        """
        descriptor = self.descriptor
        handle = descriptor.handle
        kind = descriptor.return_kind
        ret = self.return_type

        head = ""
        if self.returns_vector:
            element = self._outputs[0].strip_pointer()
            if not custom_allocator:
                head = self.generate(definition, True) + "\n"
            head += "template<typename VectorAllocator"
            if not definition:
                head += f" = std::allocator<{element}>"
            if custom_allocator:
                head += ",\n         typename B"
                if not definition:
                    head += " = VectorAllocator"
                head += (
                    ",\n         typename std::enable_if<std::is_same<typename B::value_type, "
                    f"{element}>::value, int>::type"
                )
                if not definition:
                    head += " = 0"
            head += ">\n"

        if definition:
            head += "VULKAN_HPP_INLINE "
        elif ret != "void":
            head += "VULKAN_HPP_NODISCARD_WHEN_NO_EXCEPTIONS " if self.enhanced else "VULKAN_HPP_NODISCARD "

        if self.enhanced and kind is ReturnKind.RESULT:
            head += f"typename {CPP_NAMESPACE}ResultValueType<{ret}>::type "
        else:
            head += ret + " "
        if definition and handle is not None:
            head += handle.name + "::"

        params = descriptor.params
        pieces = []
        for param_type, index in zip(self.param_types, self.param_indices):
            piece = f"{param_type} {params[index].pretty_name}"
            if (
                self.enhanced
                and not definition
                and not custom_allocator
                and index in descriptor.defaulted_outputs
            ):
                piece += " = nullptr"
            pieces.append(piece)
        if custom_allocator:
            pieces.append("VectorAllocator& vectorAllocator")

        signature = render(
            FUNCTION_SIGNATURE,
            head,
            descriptor.method_name,
            ",\n".join(pieces),
            " const" if handle is not None else "",
        )
        if not definition:
            return signature + ";\n"
        return render(FUNCTION_BODY, signature, "\n".join(self._body(ret, custom_allocator)))

    def _body(self, ret: str, custom_allocator: bool) -> list[str]:
        descriptor = self.descriptor
        params = descriptor.params
        kind = descriptor.return_kind
        outputs = self._outputs
        lines = []

        if self.enhanced:
            for index, param in enumerate(params):
                array_index = descriptor.array_by_length.get(index)
                if array_index is not None:
                    lines.append(
                        f"{param.type} {param.pretty_name} = {params[array_index].pretty_name}.size();"
                    )
            if len(outputs) == 2:
                first, second = outputs
                lines.append(f"{ret} pair;")
                lines.append(f"{first.strip_pointer()}& {first.pretty_name} = pair.first;")
                lines.append(f"{second.strip_pointer()}& {second.pretty_name} = pair.second;")
            elif len(outputs) == 1:
                output = outputs[0]
                local = f"{ret} {output.pretty_name}"
                if output.length is not None:
                    allocator = ", vectorAllocator" if custom_allocator else ""
                    local += f"({descriptor.output_length}{allocator})"
                lines.append(local + ";")

        call = f"{descriptor.c_name}({', '.join(self.arguments)})"
        if kind is not ReturnKind.VOID:
            call = f"{kind.cpp_type} result = static_cast<{kind.cpp_type}>( {call} )"
        lines.append(call + ";")

        if not self.enhanced or not outputs:
            value = "result"
        elif len(outputs) == 2:
            value = "pair"
        else:
            value = outputs[0].pretty_name

        if self.enhanced and kind is ReturnKind.RESULT:
            value = "result" if ret == "void" else f"result, {value}"
            owner = f"{descriptor.handle.name}::" if descriptor.handle is not None else ""
            lines.append(
                f'return createResultValue({value}, VMA_HPP_NAMESPACE_STRING "::{owner}'
                f'{descriptor.method_name}");'
            )
        elif ret != "void":
            lines.append(f"return {value};")
        return lines


class SignatureTransformer:
    """Turns exported C prototypes into raw and enhanced C++ methods.

    Functions whose first parameter is a known handle become methods of that
    handle; all others stay free functions.
    """

    def __init__(self, handles: dict[str, HandleType]):
        """
        Args:
            handles: Known handles keyed by C type name, e.g. ``VmaAllocator``
        """
        self.handles = handles

    def describe(
        self,
        return_name: str,
        name: str,
        params: list[ParamDescriptor],
        position: int = 0,
    ) -> FunctionDescriptor:
        """Normalize one prototype and classify its parameters.

        Args:
            return_name: C return type (``void``, ``VkResult`` or ``VkBool32``)
            name: Function name without the ``vma`` prefix
            params: Parsed parameters, handle included
            position: Source offset of the prototype

        Returns:
            Descriptor with outputs, defaulted outputs and length mapping

        Raises:
            UnrecognizedDeclarationError: On an unknown return type
            UnsupportedSignatureError: On an output/return combination without mapping
            UnresolvableLengthError: On a sequence output of unknown size
        """
        try:
            return_kind = ReturnKind(return_name)
        except ValueError:
            raise UnrecognizedDeclarationError(
                f"Unknown return type: {return_name} in {FUNCTION_PREFIX}{name}"
            ) from None

        handle = self.handles.get(params[0].original_type) if params else None
        if handle is not None:
            params = params[1:]

        c_name = FUNCTION_PREFIX + name
        if handle is not None and name == "Destroy" + handle.name:
            name = "destroy"

        descriptor = FunctionDescriptor(
            c_name=c_name,
            method_name=name[:1].lower() + name[1:],
            return_kind=return_kind,
            params=list(params),
            handle=handle,
            position=position,
        )
        self._classify(descriptor)
        self._validate(descriptor)
        return descriptor

    def _classify(self, descriptor: FunctionDescriptor) -> None:
        params = descriptor.params

        # Input arrays make their length parameter redundant
        for index, param in enumerate(params):
            if param.length is None or not param.constant:
                continue
            length_index = descriptor.param_index(param.length_name or "")
            if length_index is not None and length_index not in descriptor.array_by_length:
                descriptor.array_by_length[length_index] = index

        # Optional outputs only count as a trailing run
        for index, param in enumerate(params):
            if param.pointer and not param.constant:
                if param.tag is NullTag.NOT_NULL:
                    descriptor.outputs.append(index)
                elif not param.primitive:
                    descriptor.defaulted_outputs.append(index)
                    continue
            descriptor.defaulted_outputs.clear()

    def _validate(self, descriptor: FunctionDescriptor) -> None:
        outputs = [descriptor.params[index] for index in descriptor.outputs]
        name = descriptor.c_name

        if len(outputs) >= 3:
            raise UnsupportedSignatureError(f"{name}: 3+ mandatory outputs")
        if outputs and descriptor.return_kind not in (ReturnKind.VOID, ReturnKind.RESULT):
            raise UnsupportedSignatureError(f"{name}: both return value and output parameters")
        if len(outputs) >= 2 and any(output.length is not None for output in outputs):
            raise UnsupportedSignatureError(f"{name}: 2+ mandatory outputs with at least one array")

        if len(outputs) == 1 and outputs[0].length is not None:
            length_index = descriptor.param_index(outputs[0].length_name or "")
            if length_index is not None:
                descriptor.output_length = descriptor.params[length_index].pretty_name
            else:
                descriptor.output_length = resolve_length_override(name, outputs[0].length)

    def transform(self, descriptor: FunctionDescriptor) -> tuple[MethodSignature, MethodSignature]:
        """Build the (raw, enhanced) forms of a described function."""
        return MethodSignature(descriptor, enhanced=False), MethodSignature(descriptor, enhanced=True)

    def emit(self, descriptor: FunctionDescriptor) -> tuple[str, str]:
        """Render the guarded declaration and definition text of a function.

        The enhanced form sits under ``VULKAN_HPP_DISABLE_ENHANCED_MODE``. When
        both forms take the same parameter types they cannot overload, so the
        raw form becomes the ``#else`` branch; otherwise both are emitted.

        Returns:
            (declarations, definitions)
        """
        raw, enhanced = self.transform(descriptor)
        same_signatures = raw.param_types == enhanced.param_types
        middle = "#else\n" if same_signatures else "#endif\n"
        tail = "#endif\n" if same_signatures else ""

        declarations = (
            f"\n{ENHANCED_MODE_GUARD}\n"
            + enhanced.generate(definition=False)
            + middle
            + raw.generate(definition=False)
            + tail
        )
        definitions = (
            f"\n{ENHANCED_MODE_GUARD}\n"
            + enhanced.generate(definition=True)
            + middle
            + raw.generate(definition=True)
            + tail
        )
        logger.debug(
            f"Transformed {descriptor.c_name} -> "
            f"{descriptor.handle.name + '::' if descriptor.handle else ''}{descriptor.method_name} "
            f"({len(descriptor.outputs)} outputs, {len(descriptor.array_by_length)} inferred lengths)"
        )
        return declarations, definitions
