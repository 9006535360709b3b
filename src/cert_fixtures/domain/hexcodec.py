"""
Hex codec — pure functions turning hex-digit strings into bytes and back.

Decoding rules:
  - pieces are concatenated in order before decoding
  - two hex digits produce one byte, upper- and lower-case are both accepted
  - odd total length → HexFormatError
  - any character outside [0-9a-fA-F] → HexFormatError with its offset
"""

from __future__ import annotations

from collections.abc import Iterable

from cert_fixtures.domain.errors import HexFormatError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def join_hex(parts: Iterable[str]) -> str:
    """Concatenate hex pieces in order. Raises TypeError on non-string pieces."""
    pieces: list[str] = []
    for index, part in enumerate(parts):
        if not isinstance(part, str):
            raise TypeError(
                f"Hex piece at index {index} must be str, got {type(part).__name__}"
            )
        pieces.append(part)
    return "".join(pieces)


def _check_hex(text: str) -> None:
    if len(text) % 2:
        raise HexFormatError(
            f"Buffer length must be a multiple of 2, got {len(text)} hex digits"
        )
    for offset, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise HexFormatError(f"Illegal hex character detected: {char!r} at offset {offset}")


def decode_hex(text: str) -> bytes:
    """
    Decode a single hex string into bytes.

    >>> decode_hex("deadBEEF")
    b'\\xde\\xad\\xbe\\xef'
    """
    if not isinstance(text, str):
        raise TypeError(f"Hex input must be str, got {type(text).__name__}")
    _check_hex(text)
    return bytes.fromhex(text)


def decode_hex_parts(parts: Iterable[str]) -> bytes:
    """Concatenate hex pieces in order and decode the result."""
    return decode_hex(join_hex(parts))


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex digits, two per byte."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Hex encoding needs bytes-like input, got {type(data).__name__}")
    return data.hex()
