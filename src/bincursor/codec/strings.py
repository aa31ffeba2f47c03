"""String and raw byte-run decoders.

Text is decoded with the cursor's configured encoding (UTF-8 unless the
DecoderConfig says otherwise).
"""

from __future__ import annotations

from ..cursor import Cursor
from ..exceptions import InsufficientData, InvalidData
from .primitives import decoder


def _decode_text(raw: bytes, encoding: str, what: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise InvalidData(f"Invalid {encoding} in {what}: {e}") from e


@decoder
def read_cstring(cursor: Cursor) -> str:
    """Read a null-terminated string.

    The terminator is consumed but not included in the result.

    Returns:
        Decoded string

    Raises:
        InsufficientData: If no zero byte is found before the end of the
            buffer. The scanned bytes stay consumed (position is left at the
            end of the buffer) unless rollback_on_error is set.
        InvalidData: If the bytes before the terminator do not decode

    Example:
        >>> cursor = Cursor(b"Hello\\x00World\\x00")
        >>> read_cstring(cursor), cursor.position()
        ('Hello', 6)
    """
    terminator = cursor.find(0)
    if terminator == -1:
        cursor.skip_to_end()
        raise InsufficientData(needed=1, available=0)

    raw = cursor.take(terminator - cursor.position() + 1)[:-1]
    return _decode_text(raw, cursor.config.text_encoding, "string")


@decoder
def read_fixed_string(cursor: Cursor, length: int) -> str:
    """Read a string stored in a fixed-size byte window.

    The first zero byte in the window ends the string; anything after it in
    the window is discarded. The position always advances by ``length``.

    Args:
        cursor: Cursor to read from
        length: Window size in bytes

    Returns:
        Decoded string (up to the first zero byte)

    Raises:
        ValueError: If length is negative
        InsufficientData: If fewer than ``length`` bytes remain (nothing consumed)
        InvalidData: If the retained bytes do not decode

    Example:
        >>> cursor = Cursor(b"Hello\\x00\\x00\\x00World")
        >>> read_fixed_string(cursor, 8), cursor.position()
        ('Hello', 8)
    """
    window = cursor.take(length)
    end = window.find(0)
    if end != -1:
        window = window[:end]
    return _decode_text(window, cursor.config.text_encoding, "fixed string")


@decoder
def read_bytes(cursor: Cursor, length: int) -> bytes:
    """Read a raw byte run verbatim.

    Args:
        cursor: Cursor to read from
        length: Number of bytes to read

    Returns:
        The bytes, unmodified

    Raises:
        ValueError: If length is negative
        InsufficientData: If fewer than ``length`` bytes remain (nothing consumed)
    """
    return cursor.take(length)
