"""
z-base-32 encoding of service-node public keys.

Alphabet from https://philzimmermann.com/docs/human-oriented-base-32-encoding.txt,
bit order as RFC 4648 base32: the input is one big-endian bit stream read five
bits at a time, most significant first, with the last group zero-padded on the
right. No padding characters are emitted.

The output buffer has a fixed capacity. An encoding that does not fit raises
``Base32zCapacityError``; it is never truncated.
"""

from __future__ import annotations

import logging

from ..core.errors import Base32zCapacityError, HexLengthError
from .hex import decode_hex_nibbles, hex_byte_length

logger = logging.getLogger(__name__)

ZBASE32_ALPHABET: str = "ybndrfg8ejkmcpqxot1uwisza345h769"

DEFAULT_CAPACITY: int = 64
MAX_HEX_LEN: int = 64


def encoded_length(nbytes: int) -> int:
    """Number of symbols for *nbytes* input bytes: ceil(8*nbytes/5)."""
    return (8 * nbytes + 4) // 5


def base32z_encode(data: bytes, *, capacity: int = DEFAULT_CAPACITY) -> str:
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
        raise ValueError("capacity must be a positive int")
    if not data:
        return ""

    buf = bytearray(capacity)
    ret = 0
    pos = 1
    bits = 8
    acc = data[0] & 0xFF
    while bits > 0 or pos < len(data):
        if bits < 5:
            if pos < len(data):
                acc = (acc << 8) | (data[pos] & 0xFF)
                pos += 1
                bits += 8
            else:
                # Last group: pad with zero bits up to 5.
                acc <<= 5 - bits
                bits = 5

        bits -= 5
        if ret >= capacity:
            required = encoded_length(len(data))
            logger.debug("base32z capacity exhausted: need %d, have %d", required, capacity)
            raise Base32zCapacityError(capacity, required)
        buf[ret] = ord(ZBASE32_ALPHABET[(acc >> bits) & 0x1F])
        ret += 1
        # Drop consumed bits so the accumulator stays small.
        acc &= (1 << bits) - 1

    return buf[:ret].decode("ascii")


def hex_to_base32z(src: str, *, strict: bool = False, capacity: int = DEFAULT_CAPACITY) -> str:
    """
    Encode a hex string (at most 64 UTF-8 bytes) as z-base-32.

    Every input byte contributes one full byte (its nibble value), so only
    inputs of up to 40 bytes fit the default 64-symbol buffer; longer ones
    raise ``Base32zCapacityError``. Inputs over 64 bytes are a caller error
    and raise ``HexLengthError``.
    """
    if not isinstance(src, str):
        raise TypeError("hex input must be a string")
    nbytes = hex_byte_length(src)
    if nbytes > MAX_HEX_LEN:
        raise HexLengthError(nbytes, MAX_HEX_LEN)
    return base32z_encode(decode_hex_nibbles(src, strict=strict), capacity=capacity)
