#!/usr/bin/env python3

"""Layout-compatible C++ wrappers for VMA structs."""

from ....infrastructure.logging import get_logger, log_timing
from ..parsing import STRUCT_PATTERN, declaration_body, parse_fields
from ..templating import TemplateEntry, render, render_entries
from ..templating.templates import STRUCT, STRUCTS_FILE
from .generation_context import GenerationContext

logger = get_logger(__name__)


class StructGenerator:
    """Generates ``vk_mem_alloc_structs.hpp`` and records struct names."""

    def __init__(self, context: GenerationContext):
        self.context = context

    @log_timing
    def generate(self) -> str:
        source = self.context.source
        content: list[str] = []

        for match in STRUCT_PATTERN.finditer(source):
            name = match.group(1)
            self.context.struct_names.append(name)

            body = declaration_body(source, match.end())
            fields = [
                TemplateEntry(field, position)
                for field, position in parse_fields(body, match.end())
            ]
            if not fields:
                logger.warning(f"Struct Vma{name} has no recognizable fields")

            content.append(render_entries(self.context.tree, match.start(), STRUCT, fields, name))
            self.context.count("structs")

        return render(STRUCTS_FILE, "".join(content))
