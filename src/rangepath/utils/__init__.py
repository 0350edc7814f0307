"""Utility functions for rangepath.

This module provides path length calculation and text conversion helpers.
"""

from __future__ import annotations

from .sizing import length_histogram, max_path_length, mean_path_length, path_length
from .text import path_from_str, path_to_str

__all__ = [
    # Sizing functions
    "max_path_length",
    "path_length",
    "length_histogram",
    "mean_path_length",
    # Text conversion
    "path_to_str",
    "path_from_str",
]
