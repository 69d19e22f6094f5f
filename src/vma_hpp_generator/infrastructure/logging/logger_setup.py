#!/usr/bin/env python3

"""Logger setup for generation runs."""

import logging
import sys
from datetime import datetime
from pathlib import Path


class LoggerSetup:
    """Installs the console and file handlers of one generation run.

    In check mode stdout carries the diffs of stale files, so console logging
    moves to stderr.
    """

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []
    _previous_level = logging.WARNING

    @classmethod
    def initialize(cls, log_dir: Path, verbose: bool = False, log_to_stderr: bool = False) -> None:
        """
        Initialize the logging system with console and file handlers.

        Args:
            log_dir: Directory to store log files
            verbose: If True, set console to DEBUG level; otherwise INFO
            log_to_stderr: Send console output to stderr instead of stdout
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        cls._log_file_path = log_dir / f"vma_hpp_generator_{timestamp}.log"

        root_logger = logging.getLogger()
        cls._previous_level = root_logger.level
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr if log_to_stderr else sys.stdout)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

        # The file always gets everything, including per-declaration debug lines
        file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        cls._handlers = [console_handler, file_handler]
        for handler in cls._handlers:
            root_logger.addHandler(handler)
        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.info(f"Logging initialized. Log file: {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def shutdown(cls) -> None:
        """Remove and close the installed handlers and restore the root level."""
        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(cls._previous_level)
        cls._handlers = []
        cls._initialized = False

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        """Get the current log file path."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if logging has been initialized."""
        return cls._initialized
