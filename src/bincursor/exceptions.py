"""Exception hierarchy for bincursor.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BincursorError for easy catching of any bincursor-specific error.

Every decoder reports failure by raising exactly one ParseError subclass:

- InsufficientData: fewer bytes remain than the read requires
- InvalidData: the bytes are present but violate a decoding constraint
- IoError: the byte source itself failed (file or stream acquisition)
"""

from __future__ import annotations

import enum
from typing import ClassVar


class ParseErrorKind(enum.Enum):
    """The closed set of decode failure kinds."""

    INSUFFICIENT_DATA = "insufficient_data"
    INVALID_DATA = "invalid_data"
    IO_ERROR = "io_error"


class BincursorError(Exception):
    """Base exception for all bincursor errors."""

    pass


class ParseError(BincursorError):
    """Raised when a decode operation fails.

    Catch this to handle any decode failure; inspect ``kind`` (or catch a
    subclass) to tell the three outcomes apart.

    Attributes:
        kind: Which of the three failure kinds this is
        recoverable: True when retrying the parse with more input can succeed
        message: Human-readable detail (may be empty)
    """

    kind: ClassVar[ParseErrorKind]
    recoverable: ClassVar[bool] = False

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InsufficientData(ParseError):
    """Raised when fewer bytes remain than the operation requires.

    Examples:
        - Reading a u32 with 2 bytes left
        - Null-terminated string with no terminator before end of buffer
        - Fixed-length string or byte run longer than the remaining buffer

    The caller may buffer more input and retry the whole parse from the last
    known-good position.
    """

    kind = ParseErrorKind.INSUFFICIENT_DATA
    recoverable = True

    def __init__(self, needed: int | None = None, available: int | None = None) -> None:
        self.needed = needed
        self.available = available
        if needed is not None and available is not None:
            detail = f"need {needed} bytes, {available} remaining"
        else:
            detail = ""
        super().__init__(detail)

    def __reduce__(self) -> tuple:
        return (type(self), (self.needed, self.available))

    def __str__(self) -> str:
        if self.message:
            return f"Insufficient data for parsing: {self.message}"
        return "Insufficient data for parsing"


class InvalidData(ParseError):
    """Raised when bytes are present but violate a decoding constraint.

    Examples:
        - Character byte outside the ASCII range
        - String bytes that are not valid in the configured text encoding

    Retrying with more bytes cannot fix this.
    """

    kind = ParseErrorKind.INVALID_DATA

    def __str__(self) -> str:
        return f"Invalid data: {self.message}"


class IoError(ParseError):
    """Raised when the underlying byte source fails.

    Only produced when the buffer is acquired from a file or stream; decoding
    an in-memory buffer never raises this.
    """

    kind = ParseErrorKind.IO_ERROR

    def __str__(self) -> str:
        return f"IO error: {self.message}"


def from_io_error(error: OSError) -> IoError:
    """Convert a lower-level I/O failure into an IoError.

    Args:
        error: The OSError raised by the byte source

    Returns:
        IoError carrying the stringified cause

    Example:
        >>> str(from_io_error(OSError("disk on fire")))
        'IO error: disk on fire'
    """
    return IoError(str(error))
