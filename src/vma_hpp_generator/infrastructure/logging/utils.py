#!/usr/bin/env python3

"""Logger access and the timing decorator used by the generation passes."""

import logging
from collections.abc import Callable
from functools import wraps
from time import time
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _describe_output(result: Any) -> str:
    """Size of generated text, for results that are text or collections of it."""
    if isinstance(result, str):
        return f" ({len(result)} chars)"
    if isinstance(result, dict) and all(isinstance(value, str) for value in result.values()):
        return f" ({len(result)} files, {sum(map(len, result.values()))} chars)"
    if isinstance(result, tuple) and result and all(isinstance(item, str) for item in result):
        return f" ({' + '.join(str(len(item)) for item in result)} chars)"
    return ""


def log_timing(func: F) -> F:
    """
    Decorator logging the duration of a call and the size of the text it generated.

    Failures are logged with their duration and re-raised unchanged.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__

        logger.debug(f"Starting {func_name}")
        start_time = time()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Failed {func_name} after {time() - start_time:.3f}s: {e}")
            raise

        logger.debug(f"Completed {func_name} in {time() - start_time:.3f}s{_describe_output(result)}")
        return result

    return cast("F", wrapper)
