#!/usr/bin/env python3

"""Base generator abstract class.

Provides the context-managed loading of the C header that every generator
works from.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ...infrastructure.logging import get_logger
from ...utils.text_utils import strip_comments, truncate_at

logger = get_logger(__name__)


class BaseGenerator(ABC):
    """Abstract base class for header-driven generators.

    On entry the header is read, stripped of comments and cut at the
    implementation marker. Subclasses implement ``generate()``.
    """

    def __init__(self, source_path: Path, implementation_marker: str):
        """Initialize generator with the header path.

        Args:
            source_path: Path to the C header
            implementation_marker: Text starting the implementation section
        """
        self.source_path = source_path
        self.implementation_marker = implementation_marker
        self.source: str | None = None

    def __enter__(self) -> "BaseGenerator":
        """Context manager entry - loads and prepares the header text.

        Returns:
            Self for context manager usage
        """
        logger.debug(f"Reading header: {self.source_path}")
        raw = self.source_path.read_text(encoding="utf-8")
        self.source = truncate_at(strip_comments(raw), self.implementation_marker)
        logger.info(
            f"Loaded {self.source_path} ({len(raw)} bytes, {len(self.source)} bytes of declarations)"
        )
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object | None
    ) -> None:
        """Context manager exit - drops the loaded text."""
        self.source = None

    @abstractmethod
    def generate(self) -> dict[str, str]:
        """Generate output files.

        Returns:
            Mapping of file name to content
        """
