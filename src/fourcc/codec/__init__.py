"""Four-character code codec.

This module converts 32-bit codes to and from their 4-character printable
ASCII representation.
"""

from __future__ import annotations

from .fourcc import (
    INT32_MAX,
    INT32_MIN,
    UINT32_MAX,
    Code,
    Int32,
    UInt32,
    decode,
    encode,
    is_code_string,
    to_signed,
    to_unsigned,
)

__all__ = [
    "decode",
    "encode",
    "is_code_string",
    "to_signed",
    "to_unsigned",
    "Code",
    "Int32",
    "UInt32",
    "INT32_MIN",
    "INT32_MAX",
    "UINT32_MAX",
]
