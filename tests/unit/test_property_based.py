"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from fourcc import decode, encode, to_signed, to_unsigned
from fourcc.codec.bytepack import PRINTABLE_MAX, PRINTABLE_MIN, split_code

printable_chars = st.characters(min_codepoint=PRINTABLE_MIN, max_codepoint=PRINTABLE_MAX - 1)
code_strings = st.text(alphabet=printable_chars, min_size=4, max_size=4)
uint32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
int32 = st.integers(min_value=-(1 << 31), max_value=(1 << 31) - 1)


class TestCodecProperties:
    """Property-based tests for the codec."""

    @given(text=code_strings)
    def test_encode_decode_roundtrip(self, text: str) -> None:
        """Test decode(encode(s)) == s for every valid code string."""
        code = encode(text)

        assert code is not None
        assert decode(code) == text

    @given(code=uint32)
    def test_decode_encode_roundtrip(self, code: int) -> None:
        """Test printable codes survive decode then encode."""
        text = decode(code)

        if text is not None:
            assert encode(text) == code

    @given(code=uint32)
    def test_decode_matches_printable_bytes(self, code: int) -> None:
        """Test decode succeeds exactly when every byte is printable."""
        printable = all(PRINTABLE_MIN <= byte < PRINTABLE_MAX for byte in split_code(code))

        assert (decode(code) is not None) == printable

    @given(text=st.text(min_size=0, max_size=8).filter(lambda s: len(s) != 4))
    def test_wrong_length_rejected(self, text: str) -> None:
        """Test strings that are not four characters never encode."""
        assert encode(text) is None

    @given(
        prefix=st.text(alphabet=printable_chars, min_size=0, max_size=3),
        char=st.characters(min_codepoint=0x80),
    )
    def test_non_ascii_rejected(self, prefix: str, char: str) -> None:
        """Test any character above U+007F makes a string unencodable."""
        assert encode(prefix + char) is None

    @given(code=int32)
    def test_sign_is_not_interpreted(self, code: int) -> None:
        """Test signed and unsigned forms of the same bits decode the same."""
        assert decode(code) == decode(to_unsigned(code))

    @given(code=uint32)
    def test_reinterpretation_roundtrip(self, code: int) -> None:
        """Test to_signed and to_unsigned are inverses."""
        assert to_unsigned(to_signed(code)) == code
