#!/usr/bin/env python3

"""VMA C++ binding generator orchestrator (Application Layer).

Runs the passes in order over one header:
- EnumGenerator: ``enum class`` wrappers and flags
- StructGenerator: struct wrappers (records struct names)
- HandleGenerator: handle classes, methods and free functions
"""

from pathlib import Path

from ...domain.services.conditional import ConditionalTree, build_tree
from ...domain.services.generation import (
    EnumGenerator,
    GenerationContext,
    HandleGenerator,
    StructGenerator,
)
from ...domain.services.templating.templates import UMBRELLA_FILE
from ...infrastructure.config import get_settings
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...utils.file_utils import write_if_changed
from .base_generator import BaseGenerator

logger = get_logger(__name__)

ENUMS_FILE_NAME = "vk_mem_alloc_enums.hpp"
STRUCTS_FILE_NAME = "vk_mem_alloc_structs.hpp"
HANDLES_FILE_NAME = "vk_mem_alloc_handles.hpp"
FUNCS_FILE_NAME = "vk_mem_alloc_funcs.hpp"
UMBRELLA_FILE_NAME = "vk_mem_alloc.hpp"

OUTPUT_FILES = (
    ENUMS_FILE_NAME,
    STRUCTS_FILE_NAME,
    HANDLES_FILE_NAME,
    FUNCS_FILE_NAME,
    UMBRELLA_FILE_NAME,
)


class BindingGenerator(BaseGenerator):
    """Generates the Vulkan-Hpp style C++ bindings for ``vk_mem_alloc.h``."""

    def __init__(self, source_path: Path, settings: dict | None = None):
        """Initialize generator.

        Args:
            source_path: Path to ``vk_mem_alloc.h``
            settings: Generator settings (defaults to ``get_settings()``)
        """
        self.settings = settings if settings is not None else get_settings()
        super().__init__(source_path, self.settings["IMPLEMENTATION_MARKER"])
        self.tree: ConditionalTree | None = None

    def __enter__(self) -> "BindingGenerator":
        """Context manager entry - loads the header and builds the conditional tree."""
        super().__enter__()
        assert self.source is not None
        self.tree = build_tree(self.source, self.settings["SKIP_LEVELS"])
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object | None
    ) -> None:
        self.tree = None
        super().__exit__(exc_type, exc_val, exc_tb)

    @log_timing
    def generate(self) -> dict[str, str]:
        """Run all passes.

        Returns:
            Mapping of output file name to content, in ``OUTPUT_FILES`` order

        Raises:
            RuntimeError: If called outside the context manager
            GenerationError: On any fatal generation error
        """
        if self.source is None or self.tree is None:
            raise RuntimeError("BindingGenerator must be used as a context manager")

        tracker = ProgressTracker(logger)
        context = GenerationContext(source=self.source, tree=self.tree, tracker=tracker)

        with tracker.track_operation("enums"):
            enums = EnumGenerator(context).generate()
        with tracker.track_operation("structs"):
            structs = StructGenerator(context).generate()
        with tracker.track_operation("handles"):
            handles, funcs = HandleGenerator(context).generate()

        tracker.report_summary()
        tracker.log_memory_usage()

        return {
            ENUMS_FILE_NAME: enums,
            STRUCTS_FILE_NAME: structs,
            HANDLES_FILE_NAME: handles,
            FUNCS_FILE_NAME: funcs,
            UMBRELLA_FILE_NAME: UMBRELLA_FILE,
        }

    def write(self, output_dir: Path, check: bool = False) -> int:
        """Generate and write all files that changed.

        Args:
            output_dir: Destination directory
            check: Print diffs instead of writing

        Returns:
            Number of files that changed (or would change in check mode)
        """
        changed = 0
        for name, content in self.generate().items():
            if write_if_changed(output_dir / name, content, check=check):
                changed += 1
        return changed
