"""Byte-level packing and unpacking of four-character codes.

A code is always handled as exactly four bytes, most significant byte first,
so the first character of a code string is the high byte of the integer.
"""

from __future__ import annotations

CODE_SIZE = 4
CODE_MASK = (1 << (8 * CODE_SIZE)) - 1

# Printable ASCII: space (32) up to but not including DEL (127)
PRINTABLE_MIN = 32
PRINTABLE_MAX = 127


def is_printable(byte: int) -> bool:
    """Return True if ``byte`` lies in the printable ASCII range [32, 127)."""
    return PRINTABLE_MIN <= byte < PRINTABLE_MAX


def split_code(code: int) -> bytes:
    """Split a 32-bit code into its four bytes, most significant first.

    Negative values are taken by their two's complement bits.

    Args:
        code: Integer holding 32 raw bits

    Returns:
        Four bytes in big-endian order

    Example:
        >>> split_code(0x2173697A)
        b'!siz'
    """
    unsigned_value = code & CODE_MASK

    result = bytearray()
    for i in range(CODE_SIZE - 1, -1, -1):
        result.append((unsigned_value >> (8 * i)) & 0xFF)

    return bytes(result)


def join_code(data: bytes) -> int:
    """Join four bytes, most significant first, into an unsigned 32-bit code.

    Args:
        data: Exactly four bytes

    Returns:
        Unsigned integer in [0, 2**32)

    Raises:
        ValueError: If data is not exactly four bytes long
    """
    if len(data) != CODE_SIZE:
        raise ValueError(f"join_code requires {CODE_SIZE} bytes, got {len(data)}")

    value = 0
    for byte in data:
        value = (value << 8) | byte

    return value
