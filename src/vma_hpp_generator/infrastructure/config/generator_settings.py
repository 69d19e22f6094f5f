#!/usr/bin/env python3

"""Tuning settings for the generation passes."""

import os

# Default configuration values
DEFAULT_SETTINGS = {
    # Outer conditional levels never replayed into output (include guard, section guards)
    "SKIP_LEVELS": 2,
    # Everything from this marker on is implementation, not declarations
    "IMPLEMENTATION_MARKER": "#ifdef VMA_IMPLEMENTATION",
}


def get_settings() -> dict:
    """Get generator settings with environment variable overrides.

    Variables are named ``VMA_HPP_<KEY>``, e.g. ``VMA_HPP_SKIP_LEVELS=1``.

    Returns:
        Settings dictionary
    """
    settings = DEFAULT_SETTINGS.copy()

    for key in settings:
        env_value = os.getenv(f"VMA_HPP_{key}")
        if env_value is None:
            continue
        if isinstance(settings[key], int):
            try:
                settings[key] = int(env_value)
            except ValueError:
                raise ValueError(f"VMA_HPP_{key} must be an integer, got {env_value!r}") from None
        else:
            settings[key] = env_value

    return settings
