"""Field type helpers and utilities.

This module provides the helper for declaring record fields by the wire
primitive they are decoded from.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..utils.sizing import PRIMITIVE_SIZES

# Value range of each integer primitive, applied as ge=/le= constraints
_INT_BOUNDS: dict[str, tuple[int, int]] = {
    "i8": (-(1 << 7), (1 << 7) - 1),
    "i16": (-(1 << 15), (1 << 15) - 1),
    "i32": (-(1 << 31), (1 << 31) - 1),
    "i64": (-(1 << 63), (1 << 63) - 1),
    "u8": (0, (1 << 8) - 1),
    "u16": (0, (1 << 16) - 1),
    "u32": (0, (1 << 32) - 1),
    "u64": (0, (1 << 64) - 1),
    "ptr": (0, (1 << 64) - 1),
    "size_t": (0, (1 << 64) - 1),
}


def WireField(kind: str, **kwargs: Any) -> FieldInfo:
    """Create a field decoded from a single wire primitive.

    Integer kinds get ge=/le= bounds matching their width.

    Args:
        kind: Primitive name ("u32", "f64", "bool", ...) or "cstring"
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Raises:
        ValueError: If kind is not a known wire kind

    Example:
        >>> class Header(BaseRecord):
        ...     magic: int = WireField("u32")
        ...     name: str = WireField("cstring")
    """
    if kind not in PRIMITIVE_SIZES and kind != "cstring":
        raise ValueError(f"Unknown wire kind: {kind!r}")

    if kind in _INT_BOUNDS:
        ge, le = _INT_BOUNDS[kind]
        kwargs.setdefault("ge", ge)
        kwargs.setdefault("le", le)

    return cast(FieldInfo, Field(json_schema_extra={"wire": kind}, **kwargs))

