"""VMA HPP Generator - Vulkan-Hpp style C++ bindings for the Vulkan Memory Allocator."""

from .application.generators import BindingGenerator
from .infrastructure.config import Config
from .main import main

__all__ = ["BindingGenerator", "Config", "main"]
