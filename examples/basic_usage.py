#!/usr/bin/env python3
"""Basic usage example for fourcc.

This example demonstrates:
1. Encoding and decoding four-character codes
2. Describing API properties with CodedProperty
3. Checking API statuses with CodedError
"""

from __future__ import annotations

from typing import ClassVar, Optional

from fourcc import CodedError, CodedProperty, decode, encode


class SoundProperty(CodedProperty):
    """System sound properties.

    Only the codes listed here are accepted by from_code().
    """

    domain: ClassVar[str] = "System Sound Services Property"
    known_codes: ClassVar[Optional[dict[int, str]]] = {
        0x69737569: "Is UI sound",
        0x6966656E: "Complete playback if app dies",
    }


class SoundError(CodedError):
    """System sound errors."""

    domain: ClassVar[str] = "System Sound Services Error"
    short_description: ClassVar[str] = "Unknown error"
    descriptions: ClassVar[Optional[dict[int, str]]] = {
        0x2173697A: "Bad property size",
    }


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("fourcc Basic Usage Example")
    print("=" * 60)
    print()

    # Codec
    print("1. Encoding and decoding...")
    code = encode("!siz")
    print(f"   encode('!siz') = {code} (0x{code:08X})")
    print(f"   decode({code}) = {decode(code)!r}")
    print(f"   decode(-1500) = {decode(-1500)!r}")
    print(f"   encode('5char') = {encode('5char')!r}")
    print()

    # Properties
    print("2. Describing a property...")
    prop = SoundProperty.from_code_string("isui")
    print(prop)
    print(f"   Unknown code 7 -> {SoundProperty.from_code(7)!r}")
    print()

    # Status checks
    print("3. Checking statuses...")
    for status in (0, 0x2173697A, -50):
        result = SoundError.check(status, "Setting sound property")
        if result.ok:
            print(f"   {status}: ok")
        else:
            print(result.error)
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
