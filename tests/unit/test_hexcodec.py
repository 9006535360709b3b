"""
Unit tests for the hex codec.

Covers ordered concatenation, case handling, and the explicit rejection
of odd-length and non-hex input.
"""

from __future__ import annotations

import pytest

from cert_fixtures.domain.errors import FixtureError, HexFormatError
from cert_fixtures.domain.hexcodec import (
    decode_hex,
    decode_hex_parts,
    encode_hex,
    join_hex,
)


class TestDecodeHexParts:
    """Verify decoding of ordered hex pieces."""

    def test_single_piece(self) -> None:
        """
        GIVEN ["deadbeef"]
        WHEN decoded
        THEN the 4-byte buffer DE AD BE EF is returned.
        """
        assert decode_hex_parts(["deadbeef"]) == b"\xde\xad\xbe\xef"

    def test_pieces_are_concatenated_before_decoding(self) -> None:
        """
        GIVEN ["de", "adbeef"]
        WHEN decoded
        THEN the result equals decoding "deadbeef".
        """
        assert decode_hex_parts(["de", "adbeef"]) == b"\xde\xad\xbe\xef"

    def test_order_matters(self) -> None:
        """
        GIVEN the same pieces in a different order
        WHEN decoded
        THEN the bytes follow the sequence order.
        """
        assert decode_hex_parts(["adbeef", "de"]) == b"\xad\xbe\xef\xde"

    def test_piece_boundary_may_split_a_byte(self) -> None:
        """
        GIVEN pieces of odd length whose total is even
        WHEN decoded
        THEN decoding succeeds across the boundary.
        """
        assert decode_hex_parts(["d", "ea", "d"]) == b"\xde\xad"

    def test_empty_sequence_decodes_to_empty_bytes(self) -> None:
        assert decode_hex_parts([]) == b""
        assert decode_hex_parts(["", ""]) == b""

    def test_accepts_generator(self) -> None:
        assert decode_hex_parts(p for p in ("00", "ff")) == b"\x00\xff"

    def test_odd_total_length_rejected(self) -> None:
        """
        GIVEN pieces whose total length is odd
        WHEN decoded
        THEN HexFormatError is raised mentioning the multiple-of-2 rule.
        """
        with pytest.raises(HexFormatError, match="multiple of 2"):
            decode_hex_parts(["abc"])

    def test_non_string_piece_rejected(self) -> None:
        with pytest.raises(TypeError, match="index 1"):
            decode_hex_parts(["00", b"ff"])  # type: ignore[list-item]


class TestDecodeHex:
    """Verify single-string decoding and validation."""

    def test_mixed_case(self) -> None:
        assert decode_hex("DeAdBeEf") == b"\xde\xad\xbe\xef"

    def test_full_byte_range(self) -> None:
        assert decode_hex("00017f80feff") == bytes([0x00, 0x01, 0x7F, 0x80, 0xFE, 0xFF])

    @pytest.mark.parametrize("text", ["zz", "0g", "de ad0", "0x00", "é0"])
    def test_illegal_characters_rejected(self, text: str) -> None:
        """
        GIVEN a string with a character outside [0-9a-fA-F]
        WHEN decoded
        THEN HexFormatError is raised.
        """
        with pytest.raises(HexFormatError, match="Illegal hex character"):
            decode_hex(text)

    def test_error_reports_offset(self) -> None:
        with pytest.raises(HexFormatError, match="offset 3"):
            decode_hex("abcx")

    def test_error_is_value_error_and_fixture_error(self) -> None:
        """
        GIVEN malformed hex
        WHEN decoded
        THEN the error can be caught as ValueError or FixtureError.
        """
        with pytest.raises(ValueError):
            decode_hex("q0")
        with pytest.raises(FixtureError):
            decode_hex("q0")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            decode_hex(b"00")  # type: ignore[arg-type]


class TestEncodeHex:
    """Verify encoding to lowercase hex."""

    def test_lowercase_output(self) -> None:
        assert encode_hex(b"\xde\xad\xbe\xef") == "deadbeef"

    def test_empty(self) -> None:
        assert encode_hex(b"") == ""

    def test_accepts_bytearray(self) -> None:
        assert encode_hex(bytearray(b"\x00\x0a")) == "000a"

    @pytest.mark.parametrize("value", [5, "dead", [0xDE, 0xAD]])
    def test_non_bytes_rejected(self, value: object) -> None:
        """
        GIVEN an int, str or list instead of a bytes-like object
        WHEN encoded
        THEN TypeError is raised rather than a silently converted result.
        """
        with pytest.raises(TypeError, match="bytes-like"):
            encode_hex(value)  # type: ignore[arg-type]

    def test_accepts_memoryview(self) -> None:
        assert encode_hex(memoryview(b"\xff")) == "ff"

    def test_inverse_of_decode(self) -> None:
        assert decode_hex(encode_hex(b"\x30\x03\x02\x01\x01")) == b"\x30\x03\x02\x01\x01"


class TestJoinHex:
    def test_joins_in_order(self) -> None:
        assert join_hex(["a", "b", "c"]) == "abc"
