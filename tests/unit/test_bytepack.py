"""Unit tests for byte packing utilities."""

from __future__ import annotations

import pytest

from fourcc.codec.bytepack import (
    CODE_SIZE,
    PRINTABLE_MAX,
    PRINTABLE_MIN,
    is_printable,
    join_code,
    split_code,
)


class TestSplitCode:
    """Test split_code functionality."""

    def test_most_significant_byte_first(self) -> None:
        """Test the high byte comes first."""
        assert split_code(0x01020304) == b"\x01\x02\x03\x04"

    def test_known_code(self, siz_code: int) -> None:
        """Test splitting a known four-character code."""
        assert split_code(siz_code) == b"!siz"

    def test_zero(self) -> None:
        """Test zero splits to four NUL bytes."""
        assert split_code(0) == b"\x00" * CODE_SIZE

    def test_negative_uses_twos_complement(self) -> None:
        """Test negative values split by their raw bits."""
        assert split_code(-1) == b"\xff\xff\xff\xff"
        assert split_code(-1500) == b"\xff\xff\xfa\x24"


class TestJoinCode:
    """Test join_code functionality."""

    def test_join(self) -> None:
        """Test joining four bytes."""
        assert join_code(b"\x01\x02\x03\x04") == 0x01020304
        assert join_code(b"!siz") == 0x2173697A

    def test_result_is_unsigned(self) -> None:
        """Test high bytes produce an unsigned result."""
        assert join_code(b"\xff\xff\xff\xff") == 0xFFFFFFFF

    def test_wrong_length(self) -> None:
        """Test join_code rejects anything but four bytes."""
        with pytest.raises(ValueError, match="4 bytes"):
            join_code(b"abc")

        with pytest.raises(ValueError, match="4 bytes"):
            join_code(b"abcde")

    def test_inverse_of_split(self) -> None:
        """Test join_code undoes split_code."""
        for value in (0, 1, 0x7FFFFFFF, 0x80000000, 0xFFFFFFFF, 0x2173697A):
            assert join_code(split_code(value)) == value


class TestIsPrintable:
    """Test the printable byte predicate."""

    def test_range_bounds(self) -> None:
        """Test [32, 127) bounds."""
        assert is_printable(PRINTABLE_MIN)
        assert is_printable(PRINTABLE_MAX - 1)
        assert not is_printable(PRINTABLE_MIN - 1)
        assert not is_printable(PRINTABLE_MAX)

    def test_control_and_high_bytes(self) -> None:
        """Test NUL and high bytes are not printable."""
        assert not is_printable(0x00)
        assert not is_printable(0x80)
        assert not is_printable(0xFF)
