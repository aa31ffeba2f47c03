#!/usr/bin/env python3
"""Basic usage example for bincursor.

This example demonstrates:
1. Reading primitives from a buffer with a Cursor
2. Parsing a composite record (FileMetadata)
3. Handling truncated and malformed input
4. Opting into rollback on failure
"""

from __future__ import annotations

import struct

from bincursor import (
    Cursor,
    DecoderConfig,
    FileMetadata,
    InsufficientData,
    InvalidData,
    read_bool,
    read_char,
    read_cstring,
    read_f32,
    read_u16,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bincursor Basic Usage Example")
    print("=" * 60)
    print()

    # Read primitives one after another
    print("1. Reading primitives...")
    data = struct.pack("<Hf?", 513, 21.5, True) + b"K" + b"sensor-7\x00"
    cursor = Cursor(data)

    print(f"   u16:     {read_u16(cursor)}")
    print(f"   f32:     {read_f32(cursor)}")
    print(f"   bool:    {read_bool(cursor)}")
    print(f"   char:    {read_char(cursor)!r}")
    print(f"   cstring: {read_cstring(cursor)!r}")
    print(f"   Position: {cursor.position()} / {len(cursor)}")
    print()

    # Parse a whole record
    print("2. Parsing a FileMetadata record...")
    record_bytes = struct.pack("<QIH?", 5_242_880, 1_700_000_000, 4, True) + b"song.flac\x00"
    record = FileMetadata.from_bytes(record_bytes)

    print(f"   Filename: {record.filename}")
    print(f"   Type: {record.file_type_name()}")
    print(f"   Size: {record.file_size} bytes (large: {record.is_large_file()})")
    print(f"   Minimum record size: {FileMetadata.MIN_ENCODED_SIZE} bytes")
    print()

    # Truncated input
    print("3. Handling truncated input...")
    cursor = Cursor(record_bytes[:12])
    try:
        FileMetadata.parse(cursor)
    except InsufficientData as e:
        print(f"   {e} (recoverable: {e.recoverable})")
        print(f"   Position after failure: {cursor.position()}")
    print()

    # Malformed input
    print("4. Handling malformed input...")
    try:
        read_char(Cursor(b"\xe9"))
    except InvalidData as e:
        print(f"   {e}")
    print()

    # Rollback
    print("5. Rolling back a failed string read...")
    for rollback in (False, True):
        cursor = Cursor(b"no terminator", config=DecoderConfig(rollback_on_error=rollback))
        try:
            read_cstring(cursor)
        except InsufficientData:
            print(f"   rollback_on_error={rollback}: position {cursor.position()}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
