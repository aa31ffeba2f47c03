"""Pydantic record modeling for bincursor.

This module provides the BaseRecord class, the WireField helper and the
reference FileMetadata record.
"""

from __future__ import annotations

from .base import BaseRecord
from .fields import WireField
from .metadata import FileMetadata, FileType, parse_file_metadata

__all__ = [
    "BaseRecord",
    "WireField",
    "FileMetadata",
    "FileType",
    "parse_file_metadata",
]
