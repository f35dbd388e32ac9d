"""Fixed-width hex rendering for 64-bit flag values."""

U64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def to_u64(value: int) -> int:
    """Normalize *value* to the unsigned 64-bit range.

    Negative values (signed 64-bit flag words handed over from native code)
    map to their two's-complement bit pattern; bits above 63 are dropped.
    """
    return value & U64_MASK


def hex_format(value: int) -> str:
    """Render *value* as four space-separated, zero-padded 16-bit hex groups.

    >>> hex_format(1)
    '0000 0000 0000 0001'
    >>> hex_format(1 << 62)
    '4000 0000 0000 0000'
    """
    value = to_u64(value)
    return " ".join(f"{(value >> shift) & 0xFFFF:04x}" for shift in (48, 32, 16, 0))
