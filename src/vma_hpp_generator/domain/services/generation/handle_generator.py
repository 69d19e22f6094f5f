#!/usr/bin/env python3

"""Handle classes and the methods/free functions bound to them."""

from ....infrastructure.logging import get_logger, log_timing
from ....utils.text_utils import indent_lines
from ...models.vma import HandleType
from ..parsing import FUNCTION_PATTERN, HANDLE_PATTERN, parse_function_params
from ..templating import render
from ..templating.templates import FUNCS_FILE, HANDLE_CLASS, HANDLES_FILE
from .generation_context import GenerationContext
from .signature_transformer import FUNCTION_PREFIX, SignatureTransformer

logger = get_logger(__name__)


class HandleGenerator:
    """Generates ``vk_mem_alloc_handles.hpp`` and ``vk_mem_alloc_funcs.hpp``.

    Each handle keeps its own declaration and definition streams with its own
    guard cursor, so methods discovered far apart in the header still end up
    inside their original guards within the class body.
    """

    def __init__(self, context: GenerationContext):
        self.context = context

    @log_timing
    def generate(self) -> tuple[str, str]:
        """Generate handle declarations and function definitions.

        Returns:
            (handles file text, funcs file text)
        """
        context = self.context
        source = context.source

        declarations = [f"\nstruct {name};" for name in context.struct_names]

        for match in HANDLE_PATTERN.finditer(source):
            handle = context.register_handle(match.group(2), match.group(1) is None)
            logger.debug(
                f"Handle {handle.name} ({'dispatchable' if handle.dispatchable else 'non-dispatchable'})"
            )
        declarations.append("\n\n")
        declarations.extend(f"class {handle.name};\n" for handle in context.handles.values())

        definitions: list[str] = []
        free_cursor = context.new_cursor()
        transformer = SignatureTransformer(context.handles)

        for match in FUNCTION_PATTERN.finditer(source):
            name = match.group(2)
            params = parse_function_params(FUNCTION_PREFIX + name, match.group(3))
            descriptor = transformer.describe(match.group(1), name, params, match.start())
            declaration, definition = transformer.emit(descriptor)

            handle = descriptor.handle
            if handle is not None:
                guards = handle.cursor.move_to(match.start())
                handle.declarations += [guards, declaration]
                handle.definitions += [guards, definition]
            else:
                guards = free_cursor.move_to(match.start())
                declarations += [guards, declaration]
                definitions += [guards, definition]
            context.count("functions")

        closing = free_cursor.flush()
        declarations.append(closing)
        definitions.append(closing)

        for handle in context.handles.values():
            closing = handle.cursor.flush()
            handle.declarations.append(closing)
            handle.definitions.append(closing)
            declarations.append("\n" + self._handle_class(handle))
            definitions.extend(handle.definitions)
            context.count("handles")

        return render(HANDLES_FILE, "".join(declarations)), render(FUNCS_FILE, "".join(definitions))

    @staticmethod
    def _handle_class(handle: HandleType) -> str:
        return render(
            HANDLE_CLASS,
            handle.name,
            handle.lower_name,
            indent_lines("".join(handle.declarations), 2),
        )
