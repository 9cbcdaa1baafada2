"""
Core deterministic numeric primitives
"""

from .errors import (
    Base32zCapacityError,
    ConfigError,
    HexLengthError,
    InvalidHexError,
    PrimitivesError,
)
from .exp2 import EXP2_TABLE, Exp2Scaling, exp2
from .rounding import round_half_away

__all__ = [
    "round_half_away",
    "exp2",
    "Exp2Scaling",
    "EXP2_TABLE",
    "PrimitivesError",
    "Base32zCapacityError",
    "InvalidHexError",
    "HexLengthError",
    "ConfigError",
]
