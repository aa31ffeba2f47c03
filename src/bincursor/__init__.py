"""bincursor: Little-endian binary primitive decoding

A Python library for reading fixed-width integers, floats, booleans,
characters, pointer/size values, strings and raw byte runs from an in-memory
buffer through a position-tracking Cursor.

Key Features:
- Atomic fixed-width reads (nothing consumed on short input)
- One closed error taxonomy: InsufficientData, InvalidData, IoError
- Opt-in rollback of any failed read
- Pydantic-based records assembled from decoded primitives

Quick Start:
    >>> from bincursor import Cursor, read_u32, read_cstring
    >>>
    >>> cursor = Cursor(b"\\x2a\\x00\\x00\\x00probe\\x00")
    >>> read_u32(cursor)
    42
    >>> read_cstring(cursor)
    'probe'
    >>> cursor.remaining()
    0
"""

from __future__ import annotations

from .codec import (
    read_bool,
    read_bytes,
    read_char,
    read_cstring,
    read_f32,
    read_f64,
    read_fixed_string,
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
from .config import DEFAULT_CONFIG, DecoderConfig
from .cursor import Cursor
from .exceptions import (
    BincursorError,
    InsufficientData,
    InvalidData,
    IoError,
    ParseError,
    ParseErrorKind,
    from_io_error,
)
from .models import (
    BaseRecord,
    FileMetadata,
    FileType,
    WireField,
    parse_file_metadata,
)
from .utils import PRIMITIVE_SIZES, fixed_size

__version__ = "0.1.0"

__all__ = [
    # Cursor and configuration
    "Cursor",
    "DecoderConfig",
    "DEFAULT_CONFIG",
    # Primitive decoders
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
    # String and buffer decoders
    "read_cstring",
    "read_fixed_string",
    "read_bytes",
    # Exceptions
    "BincursorError",
    "ParseError",
    "ParseErrorKind",
    "InsufficientData",
    "InvalidData",
    "IoError",
    "from_io_error",
    # Records
    "BaseRecord",
    "WireField",
    "FileMetadata",
    "FileType",
    "parse_file_metadata",
    # Sizing
    "PRIMITIVE_SIZES",
    "fixed_size",
    # Version
    "__version__",
]
