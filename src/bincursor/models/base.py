"""Base record class and bincursor-specific Pydantic configuration.

This module provides the BaseRecord class that decoded domain records inherit
from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for records assembled from decoded primitives.

    Records should inherit from this class and declare fields with
    WireField() so integer fields are bounded by their wire width.

    Records are immutable once built: a parser either returns a complete
    record or raises, so there is nothing to fill in afterwards.

    Example:
        >>> class Header(BaseRecord):
        ...     magic: int = WireField("u32")
        ...     version: int = WireField("u16")
    """

    model_config = ConfigDict(
        # Decoded values are exact Python types already
        strict=True,
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )
