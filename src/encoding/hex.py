"""
Hex character decoding for the base32z key encoder.

The input string is taken as its UTF-8 bytes and each BYTE becomes one output
byte holding its nibble value (0-15); bytes are not paired into octets.
Lenient decoding maps anything that is not ``[0-9A-Fa-f]`` to 0, so a
multi-byte character yields one zero per byte. This is what existing
service-node addresses were derived with. Strict decoding rejects such input
instead.
"""

from __future__ import annotations

import logging

from ..core.errors import InvalidHexError

logger = logging.getLogger(__name__)


def _byte_nibble(b: int) -> int | None:
    if 0x30 <= b <= 0x39:  # 0-9
        return b - 48
    if 0x41 <= b <= 0x46:  # A-F
        return b - 55
    if 0x61 <= b <= 0x66:  # a-f
        return b - 87
    return None


def hex_nibble(ch: str) -> int | None:
    """Nibble value of a single hex character, or None if *ch* is not hex."""
    if not isinstance(ch, str):
        raise TypeError("ch must be a string")
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    raw = ch.encode("utf-8")
    if len(raw) != 1:
        return None
    return _byte_nibble(raw[0])


def hex_byte_length(src: str) -> int:
    """Length of *src* in bytes, which is what the 64-character limit counts."""
    return len(src.encode("utf-8"))


def decode_hex_nibbles(src: str, *, strict: bool = False) -> bytes:
    if not isinstance(src, str):
        raise TypeError("hex input must be a string")
    raw = src.encode("utf-8")
    out = bytearray(len(raw))
    for i, b in enumerate(raw):
        v = _byte_nibble(b)
        if v is None:
            if strict:
                char = chr(b) if b < 0x80 else f"\\x{b:02x}"
                logger.debug("rejecting non-hex byte %r at %d", char, i)
                raise InvalidHexError(i, char)
            v = 0
        out[i] = v
    return bytes(out)
