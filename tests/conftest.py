"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import struct

import pytest


@pytest.fixture
def hello_world() -> bytes:
    """Two null-terminated strings back to back."""
    return b"Hello\x00World\x00"


@pytest.fixture
def metadata_bytes() -> bytes:
    """Encoded file metadata record: 2 MiB compressed image."""
    return struct.pack("<QIH?", 2_097_152, 1_700_000_000, 3, True) + b"photo.png\x00"
