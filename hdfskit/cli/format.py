"""Human-readable formatting of sizes."""

from __future__ import annotations

_UNITS = (
    ("T", 1024 ** 4),
    ("G", 1024 ** 3),
    ("M", 1024 ** 2),
    ("K", 1024),
)


def format_bytes(size: int) -> str:
    """Format a byte count with one decimal and a K/M/G/T suffix."""
    # Sizes are unsigned 64-bit quantities.
    size %= 1 << 64
    for suffix, unit in _UNITS:
        if size > unit:
            return f"{size / unit:.1f}{suffix}"
    return f"{size}B"