"""Primitive and string decoders for bincursor.

This module provides the reader functions that decode little-endian
primitives, strings and raw byte runs from a Cursor.
"""

from __future__ import annotations

from .primitives import (
    read_bool,
    read_char,
    read_f32,
    read_f64,
    read_i8,
    read_i16,
    read_i32,
    read_i64,
    read_ptr,
    read_size_t,
    read_u8,
    read_u16,
    read_u32,
    read_u64,
)
from .strings import read_bytes, read_cstring, read_fixed_string

__all__ = [
    "read_i8",
    "read_i16",
    "read_i32",
    "read_i64",
    "read_u8",
    "read_u16",
    "read_u32",
    "read_u64",
    "read_f32",
    "read_f64",
    "read_bool",
    "read_char",
    "read_ptr",
    "read_size_t",
    "read_cstring",
    "read_fixed_string",
    "read_bytes",
]
