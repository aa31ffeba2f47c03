"""File metadata record and its parser.

This module is the reference consumer of the decoders: it reads a fixed
binary layout field by field and assembles a FileMetadata record.

Binary layout (little-endian, no padding):
    - file_size: 8 bytes (u64)
    - created_at: 4 bytes (u32, Unix timestamp)
    - file_type: 2 bytes (u16)
    - is_compressed: 1 byte (bool)
    - filename: null-terminated string
"""

from __future__ import annotations

import enum
import logging
from typing import ClassVar

from ..codec import read_bool, read_cstring, read_u16, read_u32, read_u64
from ..config import DecoderConfig
from ..cursor import BytesLike, Cursor
from ..exceptions import ParseError
from ..utils.sizing import fixed_size
from .base import BaseRecord
from .fields import WireField

logger = logging.getLogger(__name__)

LARGE_FILE_THRESHOLD = 1_048_576  # 1 MiB


class FileType(enum.IntEnum):
    """Known file type codes."""

    TEXT = 1
    BINARY = 2
    IMAGE = 3
    AUDIO = 4
    VIDEO = 5


class FileMetadata(BaseRecord):
    """Metadata describing a stored file.

    Attributes:
        file_size: File size in bytes
        created_at: Creation time as a Unix timestamp
        file_type: File type code (see FileType)
        is_compressed: Whether the file contents are compressed
        filename: Original filename
    """

    file_size: int = WireField("u64")
    created_at: int = WireField("u32")
    file_type: int = WireField("u16")
    is_compressed: bool = WireField("bool")
    filename: str = WireField("cstring")

    # 15 fixed bytes plus the filename terminator
    MIN_ENCODED_SIZE: ClassVar[int] = fixed_size("u64", "u32", "u16", "bool") + 1

    @classmethod
    def parse(cls, cursor: Cursor) -> FileMetadata:
        """Parse a record from the cursor's current position."""
        return parse_file_metadata(cursor)

    @classmethod
    def from_bytes(cls, data: BytesLike, *, config: DecoderConfig | None = None) -> FileMetadata:
        """Parse a record from the start of a buffer.

        Trailing bytes after the record are ignored.
        """
        return parse_file_metadata(Cursor(data, config=config))

    def file_type_name(self) -> str:
        """Get the file type as a human-readable string.

        Returns:
            "Text", "Binary", "Image", "Audio", "Video", or "Unknown"
        """
        try:
            return FileType(self.file_type).name.capitalize()
        except ValueError:
            return "Unknown"

    def is_large_file(self) -> bool:
        """Check whether the file is larger than 1 MiB."""
        return self.file_size > LARGE_FILE_THRESHOLD


def parse_file_metadata(cursor: Cursor) -> FileMetadata:
    """Parse FileMetadata from a cursor.

    Fields are read in layout order. The first failing read aborts the parse
    and its error is raised unchanged; no partial record is returned. Bytes
    consumed before the failure stay consumed.

    Args:
        cursor: Cursor positioned at the start of a record

    Returns:
        Decoded record

    Raises:
        InsufficientData: If the buffer ends inside the record
        InvalidData: If the filename is not valid text

    Example:
        >>> data = (
        ...     (2048).to_bytes(8, "little")
        ...     + (1_700_000_000).to_bytes(4, "little")
        ...     + (1).to_bytes(2, "little")
        ...     + b"\\x00"
        ...     + b"notes.txt\\x00"
        ... )
        >>> parse_file_metadata(Cursor(data)).filename
        'notes.txt'
    """
    start = cursor.position()
    try:
        file_size = read_u64(cursor)
        created_at = read_u32(cursor)
        file_type = read_u16(cursor)
        is_compressed = read_bool(cursor)
        filename = read_cstring(cursor)
    except ParseError as e:
        logger.debug(
            "FileMetadata parse failed at offset %d (record started at %d): %s",
            cursor.position(),
            start,
            e,
        )
        raise

    return FileMetadata(
        file_size=file_size,
        created_at=created_at,
        file_type=file_type,
        is_compressed=is_compressed,
        filename=filename,
    )
