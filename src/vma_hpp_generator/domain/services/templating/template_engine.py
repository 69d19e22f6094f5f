#!/usr/bin/env python3

"""Template expansion.

Two constructs are supported:

- ``$0`` ... ``$N`` positional placeholders. Multi-line replacements are
  re-indented to the placeholder's column.
- Repeated blocks ``{{{...}}}`` expanded once per entry. Inside a block,
  ``${field}`` reads a field of the entry and ``${first^middle$last}`` picks
  text by iteration (``${,$}`` gives a comma after every entry but the last).

Repeated blocks re-synchronize a guard cursor to each entry's source offset, so
entries declared under different preprocessor conditions keep their guards.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ...exceptions import TemplateError
from ..conditional import ConditionalTree, GuardCursor

T = TypeVar("T")

_LOOP = re.compile(r"([ \t]*)\{\{\{([\w\W]+?)\}\}\}\n")
_ENTRY_EXPRESSION = re.compile(r"\$\{([^}^$]*\^)?([^}$]*)(\$[^}]*)?\}")
_BLANK_OR_DIRECTIVE_INDENT = re.compile(r"^[ \t]+(?=$|#)", re.MULTILINE)


@dataclass(frozen=True)
class TemplateEntry(Generic[T]):
    """A value rendered by a repeated block and the source offset it came from."""

    data: T
    position: int


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    while len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def render(template: str, *replacements: str) -> str:
    """Replace ``$0`` ... ``$N`` with ``replacements``.

    Continuation lines of a multi-line replacement are indented to the column
    of the placeholder. Afterwards, indentation is removed from blank lines and
    from preprocessor directives.

    Args:
        template: Template text
        *replacements: Replacement strings, by position

    Returns:
        Rendered text
    """
    for number, replacement in enumerate(replacements):
        placeholder = f"${number}"
        lines = _split_lines(replacement)
        last = len(template)
        while True:
            index = template.rfind(placeholder, 0, last + len(placeholder))
            if index == -1:
                break
            line_start = template.rfind("\n", 0, index) + 1
            indent = "\n" + " " * (index - line_start)
            template = (
                template[:index]
                + indent.join(lines)
                + template[index + len(placeholder):]
            )
            last = index - 1
    return _BLANK_OR_DIRECTIVE_INDENT.sub("", template)


def _compile_block(
    body: str, entries: Sequence[TemplateEntry[Any]]
) -> list[Callable[[int], str]]:
    """Split a repeated block into per-iteration text producers."""
    parts: list[Callable[[int], str]] = []
    fields: dict[str, Callable[[Any], object]] = (
        getattr(type(entries[0].data), "TEMPLATE_FIELDS", {}) if entries else {}
    )
    count = len(entries)
    last_end = 0

    for match in _ENTRY_EXPRESSION.finditer(body):
        text = body[last_end:match.start()]
        parts.append(lambda i, text=text: text)
        last_end = match.end()
        first, middle, last = match.groups()

        if first is None and last is None:
            if not entries:
                continue
            accessor = fields.get(middle)
            if accessor is None:
                raise TemplateError(
                    f"{type(entries[0].data).__name__} has no template field '{middle}'"
                )
            parts.append(lambda i, accessor=accessor: str(accessor(entries[i].data)))
        else:

            def choose(i: int, first=first, middle=middle, last=last) -> str:
                if first is not None and i == 0:
                    return first[:-1]
                if last is not None and i == count - 1:
                    return last[1:]
                return middle

            parts.append(choose)

    tail = body[last_end:]
    parts.append(lambda i: tail)
    return parts


def render_entries(
    tree: ConditionalTree,
    position: int,
    template: str,
    entries: Sequence[TemplateEntry[Any]],
    *replacements: str,
) -> str:
    """Expand repeated blocks for ``entries``, then positional placeholders.

    The result is wrapped in the guards enclosing ``position`` and every entry
    is wrapped in its own guards inside the block. All guards are closed at the
    end, so the returned fragment is self-contained.

    Args:
        tree: Conditional tree of the source text
        position: Source offset of the declaration being rendered
        template: Template text
        entries: Values for the repeated blocks
        *replacements: Positional replacement strings

    Returns:
        Rendered, guard-balanced text
    """
    cursor = GuardCursor(tree)
    content = [cursor.move_to(position)]
    last_index = 0

    for loop in _LOOP.finditer(template):
        content.append(template[last_index:loop.start()])
        last_index = loop.end()
        indent = loop.group(1)
        parts = _compile_block(loop.group(2), entries)

        for i, entry in enumerate(entries):
            guards = cursor.move_to(entry.position)
            content.append(guards)
            # A directive must end its line, even before the first entry
            if i != 0 or guards:
                content.append("\n")
            content.append(indent)
            content.extend(part(i) for part in parts)

        content.append(cursor.move_to(position))
        content.append("\n")

    content.append(template[last_index:])
    content.append(cursor.flush())
    return render("".join(content), *replacements)
