"""Text helpers for preparing header source and generated output."""

import re

_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT = re.compile(r"//.*")


def strip_comments(text: str) -> str:
    """Remove ``/* */`` and ``//`` comments."""
    text = _BLOCK_COMMENT.sub("", text)
    return _LINE_COMMENT.sub("", text)


def truncate_at(text: str, marker: str) -> str:
    """Cut ``text`` at the first occurrence of ``marker`` (kept whole if absent)."""
    index = text.find(marker)
    return text if index == -1 else text[:index]


def indent_lines(text: str, width: int) -> str:
    """Indent every line by ``width`` spaces; each line ends with a newline."""
    prefix = " " * width
    return "".join(f"{prefix}{line}\n" for line in text.splitlines())
