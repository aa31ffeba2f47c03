"""Wire size calculation utilities.

This module provides the on-wire byte widths of the primitive types and
computes the size of fixed-width layouts without decoding.
"""

from __future__ import annotations

# Byte width of every fixed-width primitive on the wire
PRIMITIVE_SIZES: dict[str, int] = {
    "i8": 1,
    "i16": 2,
    "i32": 4,
    "i64": 8,
    "u8": 1,
    "u16": 2,
    "u32": 4,
    "u64": 8,
    "f32": 4,
    "f64": 8,
    "bool": 1,
    "char": 1,
    "ptr": 8,
    "size_t": 8,
}


def fixed_size(*names: str) -> int:
    """Calculate the total width of a run of fixed-width primitives.

    Args:
        *names: Primitive names, in layout order

    Returns:
        Total size in bytes

    Raises:
        KeyError: If a name is not a fixed-width primitive

    Example:
        >>> fixed_size("u64", "u32", "u16", "bool")
        15
    """
    total = 0
    for name in names:
        if name not in PRIMITIVE_SIZES:
            raise KeyError(f"Not a fixed-width primitive: {name!r}")
        total += PRIMITIVE_SIZES[name]
    return total

