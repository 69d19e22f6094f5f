#!/usr/bin/env python3

"""Infrastructure layer: configuration and logging."""
