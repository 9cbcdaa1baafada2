"""Exception types for the deterministic primitives.

Recoverable failures derive from ``PrimitivesError``. ``HexLengthError`` is a
caller contract breach and derives from ``AssertionError`` instead.
"""

from __future__ import annotations


class PrimitivesError(Exception):
    """Base class for recoverable primitive failures."""


class Base32zCapacityError(PrimitivesError):
    """Raised when an encoding does not fit the fixed output buffer."""

    def __init__(self, capacity: int, required: int) -> None:
        self.capacity = capacity
        self.required = required
        super().__init__(f"base32z output needs {required} symbols, capacity is {capacity}")


class InvalidHexError(PrimitivesError, ValueError):
    """Raised by strict hex decoding on a non-hex character."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(f"invalid hex character {char!r} at position {position}")


class HexLengthError(AssertionError):
    """Raised when a hex input is longer than the encoder accepts."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"hex input has {length} chars, limit is {limit} (fixed-length keys only)")


class ConfigError(PrimitivesError, ValueError):
    """Raised when a configuration source is malformed."""
