"""Run configuration: where the header is read from and where bindings go."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUE_VALUES = ("true", "1", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUE_VALUES


@dataclass
class Config:
    """Paths and switches of one generator run.

    Environment variables (also read from ``.env``):

    - ``VMA_HEADER_PATH``: input header, default ``vk_mem_alloc.h``
    - ``OUTPUT_DIR``: directory receiving the ``.hpp`` files, default ``include``
    - ``LOG_DIR``: directory for run logs, default ``logs``
    - ``VERBOSE``: debug output on the console
    """

    source_path: Path
    output_dir: Path
    verbose: bool = False
    log_dir: Path = Path("logs")
    check: bool = False

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Build a configuration from the environment.

        Variables already set in the environment win over the ``.env`` file.

        Args:
            env_path: ``.env`` file to load, ``./.env`` when omitted

        Returns:
            Config object
        """
        env_file = env_path if env_path is not None else Path.cwd() / ".env"
        if env_file.is_file():
            load_dotenv(env_file)

        return cls(
            source_path=Path(os.getenv("VMA_HEADER_PATH") or "vk_mem_alloc.h"),
            output_dir=Path(os.getenv("OUTPUT_DIR") or "include"),
            verbose=env_flag("VERBOSE"),
            log_dir=Path(os.getenv("LOG_DIR") or "logs"),
        )

    @classmethod
    def from_args(
        cls,
        source_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        check: Optional[bool] = None,
    ) -> "Config":
        """
        Apply command line values on top of :meth:`from_env`.

        Arguments left as ``None`` keep the environment value.
        """
        overrides = {
            "source_path": source_path,
            "output_dir": output_dir,
            "verbose": verbose,
            "log_dir": log_dir,
            "check": check,
        }
        return replace(
            cls.from_env(),
            **{name: value for name, value in overrides.items() if value is not None},
        )

    def validate(self) -> None:
        """
        Check that the header can be read and the output path can hold files.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.source_path.exists():
            raise ValueError(f"Header file not found: {self.source_path}")
        if not self.source_path.is_file():
            raise ValueError(f"Not a file: {self.source_path}")
        if self.output_dir.exists() and not self.output_dir.is_dir():
            raise ValueError(f"Output path is not a directory: {self.output_dir}")

    def ensure_output_dir(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
