"""Run the binding generator with ``python -m vma_hpp_generator``."""

from .main import main

main()
