"""Change-aware writing of generated files."""

import difflib
from pathlib import Path

from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


def write_if_changed(path: Path, content: str, check: bool = False) -> bool:
    """Write ``content`` to ``path`` unless it is already up to date.

    Args:
        path: Destination file
        content: Expected file content
        check: Only report a unified diff, never write

    Returns:
        True if the file was (or, in check mode, would be) changed
    """
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if existing == content:
        logger.debug(f"Up to date: {path}")
        return False

    if check:
        diff = difflib.unified_diff(
            existing.splitlines(),
            content.splitlines(),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            lineterm="",
        )
        print("\n".join(diff))
        return True

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {path} ({len(content)} bytes)")
    return True
