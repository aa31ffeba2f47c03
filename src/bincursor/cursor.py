"""Read cursor over an immutable byte buffer.

This module provides the Cursor class that every decoder reads from. A cursor
holds the buffer and a read position; the position only moves forward through
successful reads (or back to a checkpoint after a failed one).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Union

from .config import DEFAULT_CONFIG, DecoderConfig
from .exceptions import InsufficientData, ParseError, from_io_error

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class Cursor:
    """Reads bytes sequentially from an immutable buffer.

    A cursor is created at position 0 for one decode session and discarded
    when that session ends. It is not thread-safe: use one cursor per parse,
    from a single thread. Several cursors may share the same buffer.

    Example:
        >>> cursor = Cursor(b"\\x01\\x02\\x03")
        >>> cursor.take(2)
        b'\\x01\\x02'
        >>> cursor.position(), cursor.remaining()
        (2, 1)
    """

    def __init__(self, data: BytesLike, *, config: DecoderConfig | None = None) -> None:
        """Initialize a cursor over the given data.

        Args:
            data: Buffer to read. Mutable buffers are snapshotted so later
                writes to them are not seen by the cursor.
            config: Decoder options (defaults to DEFAULT_CONFIG)
        """
        # bytes(b) is a no-op for bytes input
        self._data = bytes(data)
        self._position = 0
        self.config = config if config is not None else DEFAULT_CONFIG

    @classmethod
    def from_stream(cls, stream: BinaryIO, *, config: DecoderConfig | None = None) -> Cursor:
        """Create a cursor over everything remaining in a binary stream.

        Args:
            stream: Readable binary file object
            config: Decoder options

        Returns:
            Cursor positioned at the first byte read from the stream

        Raises:
            IoError: If reading from the stream fails
        """
        try:
            data = stream.read()
        except OSError as e:
            logger.debug("Stream read failed: %s", e)
            raise from_io_error(e) from e
        return cls(data, config=config)

    @classmethod
    def from_path(cls, path: str | Path, *, config: DecoderConfig | None = None) -> Cursor:
        """Create a cursor over the contents of a file.

        Args:
            path: File to read
            config: Decoder options

        Returns:
            Cursor positioned at the start of the file contents

        Raises:
            IoError: If the file cannot be read
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise from_io_error(e) from e
        logger.debug("Loaded %d bytes from %s", len(data), path)
        return cls(data, config=config)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={len(self._data)})"

    @property
    def data(self) -> bytes:
        """The full underlying buffer."""
        return self._data

    def position(self) -> int:
        """Return the current read position.

        Returns:
            Offset of the next byte to be read
        """
        return self._position

    def remaining(self) -> int:
        """Return the number of unread bytes.

        Returns:
            Buffer length minus current position
        """
        return len(self._data) - self._position

    def take(self, num_bytes: int) -> bytes:
        """Consume exactly ``num_bytes`` bytes.

        The read is atomic: if fewer bytes remain, nothing is consumed.

        Args:
            num_bytes: Number of bytes to consume

        Returns:
            The consumed bytes

        Raises:
            ValueError: If num_bytes is negative
            InsufficientData: If fewer than num_bytes bytes remain
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")

        available = self.remaining()
        if num_bytes > available:
            raise InsufficientData(needed=num_bytes, available=available)

        start = self._position
        self._position = start + num_bytes
        return self._data[start : self._position]

    def find(self, byte: int) -> int:
        """Locate the next occurrence of a byte value.

        Args:
            byte: Byte value to search for (0-255)

        Returns:
            Absolute offset of the byte at or after the current position, or -1

        Raises:
            ValueError: If byte is outside 0-255
        """
        if not 0 <= byte <= 255:
            raise ValueError(f"byte must be 0-255, got {byte}")
        return self._data.find(byte, self._position)

    def skip_to_end(self) -> None:
        """Consume every remaining byte."""
        self._position = len(self._data)

    @contextmanager
    def checkpoint(self) -> Iterator[int]:
        """Restore the position if a ParseError escapes the block.

        Yields:
            The position on entry

        Example:
            ```python
            with cursor.checkpoint():
                header = read_u32(cursor)
                name = read_cstring(cursor)
            # On failure the cursor is back where it was before the header
            ```
        """
        start = self._position
        try:
            yield start
        except ParseError:
            self._position = start
            raise
