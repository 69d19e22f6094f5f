#!/usr/bin/env python3

"""Generator orchestrators."""

from .base_generator import BaseGenerator
from .binding_generator import OUTPUT_FILES, BindingGenerator

__all__ = ["BaseGenerator", "BindingGenerator", "OUTPUT_FILES"]
