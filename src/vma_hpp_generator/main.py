"""Main entry point for the VMA C++ binding generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application.generators import BindingGenerator
from .domain.exceptions import GenerationError
from .infrastructure.config import Config, get_settings
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate Vulkan-Hpp style C++ bindings from vk_mem_alloc.h",
        epilog="""
Examples:
  # Generate into ./include (quiet mode - default)
  vma-hpp-generate VulkanMemoryAllocator/include/vk_mem_alloc.h

  # Custom output directory with debug logs
  vma-hpp-generate vk_mem_alloc.h -o include/ --verbose

  # Verify committed bindings are up to date (exit 1 on drift)
  vma-hpp-generate vk_mem_alloc.h -o include/ --check

  # Using .env file for configuration
  echo 'VMA_HEADER_PATH=VulkanMemoryAllocator/include/vk_mem_alloc.h' > .env
  vma-hpp-generate
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "header",
        type=Path,
        nargs="?",
        help="Path to vk_mem_alloc.h (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for generated headers (default: ./include)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print a diff of stale files instead of writing them",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="DIR",
        help="Directory for log files (default: ./logs)",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for header-to-C++ binding generation."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = Config.from_args(
            source_path=args.header,
            output_dir=args.output,
            verbose=args.verbose or None,
            log_dir=args.log_dir,
            check=args.check or None,
        )
        config.validate()
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose, log_to_stderr=config.check)
    logger = get_logger(__name__)

    logger.debug(f"Header file: {config.source_path}")
    logger.debug(f"Output directory: {config.output_dir}")
    logger.debug(f"Settings: {settings}")

    if not config.check:
        config.ensure_output_dir()

    try:
        with BindingGenerator(config.source_path, settings) as generator:
            changed = generator.write(config.output_dir, check=config.check)
    except (GenerationError, OSError) as e:
        logger.error(f"Fatal error during generation: {e}")
        if config.verbose:
            logger.exception("Traceback")
        sys.exit(1)

    if config.check:
        if changed:
            logger.error(f"{changed} generated file(s) are out of date")
            sys.exit(1)
        logger.info("All generated files are up to date")
    else:
        logger.info(f"Generation complete: {changed} file(s) updated in {config.output_dir}")

    sys.exit(0)


if __name__ == "__main__":
    main()
