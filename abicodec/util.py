"""Small helpers shared by the encoding modules."""

WORD_SIZE = 32
"""Size in bytes of one ABI word."""

ADDRESS_SIZE = 20
"""Size in bytes of an ABI address."""

_U32_MAX = 0xFFFFFFFF


def pad_u32(value: int) -> bytes:
    """Return a 32-bit unsigned value right-aligned in a 32-byte big-endian word."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value out of range for u32: {value}")
    return value.to_bytes(WORD_SIZE, "big")