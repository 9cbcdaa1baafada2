"""`encoding`: z-base-32 rendering of hex public keys.

Public API:
- `hex_to_base32z(src, *, strict=False, capacity=64) -> str`
- `base32z_encode(data, *, capacity=64) -> str`
- `decode_hex_nibbles(src, *, strict=False) -> bytes`
"""

from .base32z import DEFAULT_CAPACITY, MAX_HEX_LEN, ZBASE32_ALPHABET, base32z_encode, encoded_length, hex_to_base32z
from .hex import decode_hex_nibbles, hex_byte_length, hex_nibble

__all__ = [
    "hex_to_base32z",
    "base32z_encode",
    "encoded_length",
    "decode_hex_nibbles",
    "hex_nibble",
    "hex_byte_length",
    "ZBASE32_ALPHABET",
    "DEFAULT_CAPACITY",
    "MAX_HEX_LEN",
]
