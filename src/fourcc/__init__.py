"""fourcc: Four-Character Code Utilities

A Python library for converting 32-bit codes to and from four-character code
strings, as used by operating-system APIs for error statuses and property
identifiers. A code prints as a readable 4-letter tag ('!siz') instead of an
opaque number (561211770).

Key Features:
- Strict, partial codec: non-printable codes decode to None, never raise
- 32-bit width enforced at the call boundary with pydantic
- Pydantic-based coded property models
- Coded errors with status checks returning Success/Failure results

Quick Start:
    >>> from fourcc import decode, encode
    >>> encode("!siz")
    561211770
    >>> decode(561211770)
    '!siz'
    >>> decode(-1500) is None
    True
"""

from __future__ import annotations

import logging

from .codec import (
    Code,
    Int32,
    UInt32,
    decode,
    encode,
    is_code_string,
    to_signed,
    to_unsigned,
)
from .exceptions import CodedError, FourCCError
from .formatting import DescribeOptions, describe
from .models import CodedProperty
from .status import NO_ERR, Failure, StatusResult, Success, check_status

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "decode",
    "encode",
    "is_code_string",
    "to_signed",
    "to_unsigned",
    # Code types
    "Code",
    "Int32",
    "UInt32",
    # Formatting
    "describe",
    "DescribeOptions",
    # Models
    "CodedProperty",
    # Exceptions
    "FourCCError",
    "CodedError",
    # Status checks
    "NO_ERR",
    "Success",
    "Failure",
    "StatusResult",
    "check_status",
    # Version
    "__version__",
]
