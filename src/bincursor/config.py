"""Decoder configuration.

This module provides the configuration dataclass shared by a Cursor and every
decoder that reads from it.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderConfig:
    """Options that govern how decoders read from a Cursor.

    Attributes:
        text_encoding: Codec used by the text readers (default "utf-8").
            Must be a text codec that encodes NUL as a single zero byte
            (UTF-8, ASCII, Latin-1, cp1252, ...), because the string readers
            treat the first zero byte as the terminator. Wide encodings
            such as UTF-16 and UTF-32 are rejected.

        rollback_on_error: Restore the cursor position when a decoder fails
            (default False).
            - False: fixed-width reads are still atomic on short input, but
              read_cstring consumes up to end of buffer before reporting a
              missing terminator, and reads that fail validation keep the
              bytes they consumed.
            - True: every failed read leaves the position where it was.

    Examples:
        ```python
        from bincursor import Cursor, DecoderConfig, read_cstring

        # Latin-1 strings, all-or-nothing reads
        config = DecoderConfig(text_encoding="latin-1", rollback_on_error=True)
        cursor = Cursor(b"caf\\xe9\\x00", config=config)
        read_cstring(cursor)  # "café"
        ```
    """

    text_encoding: str = "utf-8"
    rollback_on_error: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            codecs.lookup(self.text_encoding)
        except LookupError as e:
            raise ValueError(f"Unknown text_encoding: {self.text_encoding!r}") from e

        # Binary transforms such as "hex" and "base64" are not text codecs
        try:
            nul = "\x00".encode(self.text_encoding)
            b"".decode(self.text_encoding)
        except LookupError as e:
            raise ValueError(f"Not a text encoding: {self.text_encoding!r}") from e

        if nul != b"\x00":
            raise ValueError(
                f"text_encoding {self.text_encoding!r} does not encode NUL as a single zero byte"
            )


DEFAULT_CONFIG = DecoderConfig()
