"""Unit tests for the error model."""

from __future__ import annotations

import pytest

from bincursor import (
    BincursorError,
    InsufficientData,
    InvalidData,
    IoError,
    ParseError,
    ParseErrorKind,
    from_io_error,
)


class TestErrorKinds:
    """Test the three failure kinds."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InsufficientData(), ParseErrorKind.INSUFFICIENT_DATA),
            (InvalidData("bad"), ParseErrorKind.INVALID_DATA),
            (IoError("broken pipe"), ParseErrorKind.IO_ERROR),
        ],
    )
    def test_kind(self, error: ParseError, kind: ParseErrorKind) -> None:
        """Test each error reports its kind."""
        assert error.kind is kind
        assert isinstance(error, ParseError)
        assert isinstance(error, BincursorError)

    def test_only_insufficient_data_is_recoverable(self) -> None:
        """Test retry semantics."""
        assert InsufficientData.recoverable is True
        assert InvalidData.recoverable is False
        assert IoError.recoverable is False


class TestErrorMessages:
    """Test string rendering."""

    def test_insufficient_data_plain(self) -> None:
        """Test the message without counts."""
        assert str(InsufficientData()) == "Insufficient data for parsing"

    def test_insufficient_data_with_counts(self) -> None:
        """Test the message with counts."""
        error = InsufficientData(needed=8, available=3)

        assert str(error) == "Insufficient data for parsing: need 8 bytes, 3 remaining"

    def test_invalid_data(self) -> None:
        """Test the message carries the violated constraint."""
        assert str(InvalidData("Non-ASCII character")) == "Invalid data: Non-ASCII character"

    def test_io_error(self) -> None:
        """Test the IO error message."""
        assert str(IoError("eof")) == "IO error: eof"


class TestIoConversion:
    """Test OSError conversion."""

    def test_from_io_error(self) -> None:
        """Test the cause is stringified."""
        error = from_io_error(FileNotFoundError(2, "No such file or directory"))

        assert isinstance(error, IoError)
        assert "No such file or directory" in error.message
