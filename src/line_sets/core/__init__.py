"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of line_sets.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Core utilities and shared components for line_sets.

This module contains:
- Centralized configuration management
- Path handling
"""

from .config import Config

__all__ = ["Config"]
