"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from vma_hpp_generator.domain.services.conditional import ConditionalTree, build_tree
from vma_hpp_generator.domain.services.generation import GenerationContext
from vma_hpp_generator.infrastructure.config import DEFAULT_SETTINGS
from vma_hpp_generator.utils import strip_comments, truncate_at


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def sample_header() -> Path:
    """Return path to the trimmed-down vk_mem_alloc.h shipped with the tests."""
    return Path(__file__).parent / "resources" / "vk_mem_alloc_sample.h"


@pytest.fixture(scope="session")
def sample_source(sample_header: Path) -> str:
    """Sample header as the generators see it: comment-free, declarations only."""
    text = strip_comments(sample_header.read_text(encoding="utf-8"))
    return truncate_at(text, DEFAULT_SETTINGS["IMPLEMENTATION_MARKER"])


@pytest.fixture
def sample_tree(sample_source: str) -> ConditionalTree:
    """Conditional tree of the sample header with the default skip levels."""
    return build_tree(sample_source, DEFAULT_SETTINGS["SKIP_LEVELS"])


@pytest.fixture
def sample_context(sample_source: str, sample_tree: ConditionalTree) -> GenerationContext:
    """
    Fresh generation context over the sample header.

    Uses function scope so each test gets its own handle registry.
    """
    return GenerationContext(source=sample_source, tree=sample_tree)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove generator variables from the environment for the test's duration."""
    for name in (
        "VMA_HEADER_PATH",
        "OUTPUT_DIR",
        "VERBOSE",
        "LOG_DIR",
        "VMA_HPP_SKIP_LEVELS",
        "VMA_HPP_IMPLEMENTATION_MARKER",
    ):
        # setenv first so teardown also removes values loaded by dotenv
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
