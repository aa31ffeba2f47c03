"""Fixed-width primitive decoders.

This module provides one reader function per primitive type. Every reader
takes a Cursor, consumes a fixed number of bytes, and returns the decoded
value. Multi-byte values are little-endian.

All readers are atomic on short input: when fewer bytes remain than the
type's width, InsufficientData is raised and nothing is consumed.
"""

from __future__ import annotations

import functools
import struct
from typing import Any, Callable, TypeVar

from ..cursor import Cursor
from ..exceptions import InvalidData

T = TypeVar("T")

_I8 = struct.Struct("<b")
_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")
_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


def decoder(func: Callable[..., T]) -> Callable[..., T]:
    """Apply the cursor's rollback policy to a reader.

    When ``cursor.config.rollback_on_error`` is set, a failed read restores
    the position it started from. Otherwise the reader's own consumption
    behavior is left as is.
    """

    @functools.wraps(func)
    def wrapper(cursor: Cursor, *args: Any, **kwargs: Any) -> T:
        if not cursor.config.rollback_on_error:
            return func(cursor, *args, **kwargs)
        with cursor.checkpoint():
            return func(cursor, *args, **kwargs)

    return wrapper


def _unpack(cursor: Cursor, fmt: struct.Struct) -> int | float:
    return fmt.unpack(cursor.take(fmt.size))[0]


# Signed integers


@decoder
def read_i8(cursor: Cursor) -> int:
    """Read a signed 8-bit integer."""
    return int(_unpack(cursor, _I8))


@decoder
def read_i16(cursor: Cursor) -> int:
    """Read a little-endian signed 16-bit integer."""
    return int(_unpack(cursor, _I16))


@decoder
def read_i32(cursor: Cursor) -> int:
    """Read a little-endian signed 32-bit integer.

    Example:
        >>> read_i32(Cursor(b"\\x01\\x02\\x03\\x04")) == 0x04030201
        True
    """
    return int(_unpack(cursor, _I32))


@decoder
def read_i64(cursor: Cursor) -> int:
    """Read a little-endian signed 64-bit integer."""
    return int(_unpack(cursor, _I64))


# Unsigned integers


@decoder
def read_u8(cursor: Cursor) -> int:
    """Read an unsigned 8-bit integer."""
    return cursor.take(1)[0]


@decoder
def read_u16(cursor: Cursor) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    return int(_unpack(cursor, _U16))


@decoder
def read_u32(cursor: Cursor) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    return int(_unpack(cursor, _U32))


@decoder
def read_u64(cursor: Cursor) -> int:
    """Read a little-endian unsigned 64-bit integer."""
    return int(_unpack(cursor, _U64))


# Floating point


@decoder
def read_f32(cursor: Cursor) -> float:
    """Read a little-endian IEEE-754 single-precision float."""
    return float(_unpack(cursor, _F32))


@decoder
def read_f64(cursor: Cursor) -> float:
    """Read a little-endian IEEE-754 double-precision float."""
    return float(_unpack(cursor, _F64))


# Single-byte types


@decoder
def read_bool(cursor: Cursor) -> bool:
    """Read a one-byte boolean.

    Returns:
        False for a zero byte, True for any other value
    """
    return cursor.take(1)[0] != 0


@decoder
def read_char(cursor: Cursor) -> str:
    """Read a single ASCII character.

    Returns:
        One-character string

    Raises:
        InsufficientData: If the buffer is exhausted
        InvalidData: If the byte is above 127 (the byte is still consumed
            unless rollback_on_error is set)
    """
    byte = cursor.take(1)[0]
    if byte > 127:
        raise InvalidData(f"Non-ASCII character 0x{byte:02x} at offset {cursor.position() - 1}")
    return chr(byte)


# Pointer and size types are fixed at 64 bits on the wire, whatever the host


@decoder
def read_ptr(cursor: Cursor) -> int:
    """Read a pointer-width value (8-byte little-endian unsigned)."""
    return int(_unpack(cursor, _U64))


@decoder
def read_size_t(cursor: Cursor) -> int:
    """Read a size-width value (8-byte little-endian unsigned)."""
    return int(_unpack(cursor, _U64))
