"""Utility functions for bincursor.

This module provides wire size calculation helpers.
"""

from __future__ import annotations

from .sizing import PRIMITIVE_SIZES, fixed_size

__all__ = [
    "PRIMITIVE_SIZES",
    "fixed_size",
]
