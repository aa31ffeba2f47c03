"""Property-based tests using hypothesis."""

from __future__ import annotations

import struct

from hypothesis import given
from hypothesis import strategies as st

from bincursor import (
    Cursor,
    InsufficientData,
    ParseError,
    read_bytes,
    read_cstring,
    read_f32,
    read_f64,
    read_fixed_string,
    read_i8,
    read_i16,
    read_i32,
    read_i64,
    read_u8,
    read_u16,
    read_u32,
    read_u64,
)

INTEGER_READERS = [
    (read_i8, "<b"),
    (read_i16, "<h"),
    (read_i32, "<i"),
    (read_i64, "<q"),
    (read_u8, "<B"),
    (read_u16, "<H"),
    (read_u32, "<I"),
    (read_u64, "<Q"),
]


@st.composite
def integer_cases(draw: st.DrawFn) -> tuple:
    reader, fmt = draw(st.sampled_from(INTEGER_READERS))
    bits = struct.calcsize(fmt) * 8
    if fmt[1].islower():
        value = draw(st.integers(min_value=-(1 << (bits - 1)), max_value=(1 << (bits - 1)) - 1))
    else:
        value = draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    return reader, fmt, value


class TestPrimitiveProperties:
    """Property-based tests for fixed-width decoders."""

    @given(case=integer_cases(), trailer=st.binary(max_size=8))
    def test_integer_decodes_canonical_encoding(self, case: tuple, trailer: bytes) -> None:
        """Test every integer decodes from its little-endian encoding."""
        reader, fmt, value = case
        encoded = struct.pack(fmt, value)
        cursor = Cursor(encoded + trailer)

        assert reader(cursor) == value
        assert cursor.position() == len(encoded)

    @given(value=st.floats(width=32, allow_nan=False))
    def test_f32_decodes_canonical_encoding(self, value: float) -> None:
        """Test single-precision floats decode exactly."""
        cursor = Cursor(struct.pack("<f", value))

        assert read_f32(cursor) == value
        assert cursor.position() == 4

    @given(value=st.floats(allow_nan=False))
    def test_f64_decodes_canonical_encoding(self, value: float) -> None:
        """Test double-precision floats decode exactly."""
        cursor = Cursor(struct.pack("<d", value))

        assert read_f64(cursor) == value
        assert cursor.position() == 8

    @given(case=integer_cases(), data=st.data())
    def test_short_buffer_only_insufficient_data(self, case: tuple, data: st.DataObject) -> None:
        """Test truncated input never raises anything but InsufficientData."""
        reader, fmt, value = case
        encoded = struct.pack(fmt, value)
        cut = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))
        cursor = Cursor(encoded[:cut])

        try:
            reader(cursor)
        except InsufficientData:
            pass
        else:
            raise AssertionError("short read succeeded")

        assert cursor.position() == 0


class TestStringProperties:
    """Property-based tests for string and byte-run decoders."""

    @given(text=st.text().filter(lambda s: "\x00" not in s), trailer=st.binary(max_size=16))
    def test_cstring_stops_at_terminator(self, text: str, trailer: bytes) -> None:
        """Test the position lands just past the terminator."""
        encoded = text.encode("utf-8")
        cursor = Cursor(encoded + b"\x00" + trailer)

        assert read_cstring(cursor) == text
        assert cursor.position() == len(encoded) + 1

    @given(
        text=st.text(max_size=8).filter(lambda s: "\x00" not in s),
        padding=st.integers(min_value=0, max_value=8),
    )
    def test_fixed_string_always_advances_by_length(self, text: str, padding: int) -> None:
        """Test the window size, not the text, decides the advance."""
        encoded = text.encode("utf-8")
        length = len(encoded) + padding
        cursor = Cursor(encoded + b"\x00" * padding + b"tail")

        assert read_fixed_string(cursor, length) == text
        assert cursor.position() == length

    @given(payload=st.binary(max_size=512))
    def test_bytes_verbatim(self, payload: bytes) -> None:
        """Test byte runs are returned unchanged."""
        cursor = Cursor(payload)

        assert read_bytes(cursor, len(payload)) == payload
        assert cursor.remaining() == 0

    @given(payload=st.binary(max_size=64))
    def test_bytes_one_past_end(self, payload: bytes) -> None:
        """Test one byte too many fails atomically."""
        cursor = Cursor(payload)

        try:
            read_bytes(cursor, len(payload) + 1)
        except InsufficientData:
            pass
        else:
            raise AssertionError("over-long read succeeded")

        assert cursor.position() == 0

    @given(data=st.binary(max_size=64))
    def test_cstring_on_arbitrary_bytes(self, data: bytes) -> None:
        """Test arbitrary input yields a string or a ParseError, nothing else."""
        cursor = Cursor(data)

        try:
            read_cstring(cursor)
        except ParseError:
            pass

        assert 0 <= cursor.position() <= len(data)
