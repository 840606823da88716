"""Four-character code conversion.

This module converts between 32-bit codes and their 4-character printable
ASCII form. Both directions are partial: a value that has no printable form
yields None rather than raising, since most raw 32-bit values (and most
strings) are not four-character codes.

The width of a code is part of the interface. ``decode`` only accepts
integers that fit in 32 bits (signed or unsigned), checked by pydantic at the
call boundary, so a wrongly sized value is a catchable ValidationError.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr, validate_call

from .bytepack import CODE_MASK, CODE_SIZE, is_printable, join_code, split_code

UINT32_MAX = CODE_MASK
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

# Unsigned 32-bit value, e.g. a property constant or FourCharCode
UInt32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]

# Signed 32-bit value, e.g. an OSStatus
Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]

# Any 32-bit value; the sign is never interpreted, only the raw bits
Code = Annotated[int, Field(strict=True, ge=INT32_MIN, le=UINT32_MAX)]


@validate_call
def decode(code: Code) -> str | None:
    """Decode a 32-bit code to its 4-character string.

    The code is split most significant byte first, so ``0x2173697A`` decodes
    to ``"!siz"``. Signed values are reinterpreted by their raw bits.

    Args:
        code: Signed or unsigned 32-bit integer

    Returns:
        The 4-character string, or None if any byte is outside [32, 127)

    Raises:
        pydantic.ValidationError: If code is not an int that fits in 32 bits

    Examples:
        >>> decode(0x2173697A)
        '!siz'
        >>> decode(0) is None
        True
    """
    data = split_code(code)

    if not all(is_printable(byte) for byte in data):
        return None

    return data.decode("ascii")


@validate_call
def encode(text: StrictStr) -> int | None:
    """Encode a 4-character string to its unsigned 32-bit code.

    Length is measured in ASCII bytes, so any character above U+007F makes the
    text unencodable even if it looks like a single character.

    Args:
        text: String of exactly four printable ASCII characters

    Returns:
        Unsigned 32-bit code, or None if the text is not a valid code string

    Raises:
        pydantic.ValidationError: If text is not a str

    Examples:
        >>> hex(encode("!siz"))
        '0x2173697a'
        >>> encode("5char") is None
        True
    """
    try:
        data = text.encode("ascii")
    except UnicodeEncodeError:
        return None

    if len(data) != CODE_SIZE:
        return None

    if not all(is_printable(byte) for byte in data):
        return None

    return join_code(data)


def is_code_string(text: str) -> bool:
    """Return True if text is a valid four-character code string."""
    return encode(text) is not None


@validate_call
def to_unsigned(code: Code) -> int:
    """Reinterpret a 32-bit value as unsigned.

    Example:
        >>> to_unsigned(-1)
        4294967295
    """
    return code & CODE_MASK


@validate_call
def to_signed(code: Code) -> int:
    """Reinterpret a 32-bit value as signed (two's complement).

    Example:
        >>> to_signed(0xFFFFFFFF)
        -1
    """
    unsigned_value = code & CODE_MASK
    if unsigned_value > INT32_MAX:
        return unsigned_value - (1 << 32)
    return unsigned_value
