#!/usr/bin/env python3

"""``enum class`` wrappers for VMA enums and flag bits."""

from ....infrastructure.logging import get_logger, log_timing
from ..parsing import ENUM_PATTERN, declaration_body, flags_name, parse_enum_members
from ..templating import TemplateEntry, render, render_entries
from ..templating.templates import ENUM, ENUMS_FILE, FLAG_TRAITS, FLAGS
from .generation_context import GenerationContext

logger = get_logger(__name__)


class EnumGenerator:
    """Generates ``vk_mem_alloc_enums.hpp``.

    Flag-bit enums additionally get a ``Flags`` alias with bitwise operators
    and a ``FlagTraits`` specialization in the Vulkan-Hpp namespace.
    """

    def __init__(self, context: GenerationContext):
        self.context = context

    @log_timing
    def generate(self) -> str:
        source = self.context.source
        tree = self.context.tree
        content: list[str] = []
        vk_content: list[str] = []

        for match in ENUM_PATTERN.finditer(source):
            name = match.group(1)
            flag_bits = name.endswith("FlagBits")
            flags = flags_name(name) if flag_bits else ""

            body = declaration_body(source, match.end())
            entries = [
                TemplateEntry(entry, position)
                for entry, position in parse_enum_members(name, body, match.end())
            ]
            logger.debug(f"Enum {name}: {len(entries)} members")

            content.append(
                render_entries(
                    tree, match.start(), ENUM, entries, name, f" : Vma{flags}" if flag_bits else ""
                )
            )
            if flag_bits:
                content.append(render_entries(tree, match.start(), FLAGS, entries, name, flags))
                vk_content.append(render_entries(tree, match.start(), FLAG_TRAITS, entries, name))
            self.context.count("enums")

        return render(ENUMS_FILE, "".join(content), "".join(vk_content))
