"""Infrastructure configuration module."""

from .app_config import Config
from .generator_settings import DEFAULT_SETTINGS, get_settings

__all__ = ["Config", "DEFAULT_SETTINGS", "get_settings"]
