#!/usr/bin/env python3

"""Fatal error taxonomy for one generation run.

Every error aborts the run; none of them is meant to be caught and retried.
"""


class GenerationError(ValueError):
    """Base class for all fatal generation errors."""


class MalformedGuardError(GenerationError):
    """Preprocessor conditionals do not form a well-nested tree."""


class UnrecognizedDeclarationError(GenerationError):
    """A declaration does not match any supported shape."""


class UnsupportedSignatureError(GenerationError):
    """A function's outputs and return kind have no defined C++ mapping."""


class UnresolvableLengthError(GenerationError):
    """An array length annotation names no visible parameter and has no override."""


class TemplateError(GenerationError):
    """A template references a field its entries do not provide."""
