#!/usr/bin/env python3

"""Domain layer: declaration models and generation services."""
