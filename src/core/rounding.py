"""
Round-half-away-from-zero for binary64 floats (deterministic, libm-free).

Python's builtin ``round`` rounds half to even, and ``math.floor(x + 0.5)``
is wrong for ``x = 0.5 - 2**-54`` and for values near ``2**52``. This module
rounds with plain IEEE-754 additions only, so results are identical on every
platform:

- ties go away from zero: 0.5 -> 1.0, -2.5 -> -3.0
- inputs in (-0.5, 0) return -0.0
- zeros, NaN and values already beyond the integer precision limit are returned unchanged
"""

from __future__ import annotations

import sys

# 2^(DBL_MANT_DIG-1): every double with magnitude >= this is already an integer.
TWO_MANT_DIG: float = float(1 << (sys.float_info.mant_dig - 1))


def round_half_away(x: float) -> float:
    """
    Round *x* to the nearest integer, breaking ties away from zero.

    Adding and subtracting ``TWO_MANT_DIG`` forces the hardware to round to an
    integer (direction does not matter); the follow-up comparison undoes an
    overshoot so the net effect is ``floor(|x| + 0.5)`` with the sign restored.
    """
    z = x
    if z > 0.0:
        if z < 0.5:
            z = 0.0
        elif z < TWO_MANT_DIG:
            z += 0.5
            y = z
            z += TWO_MANT_DIG
            z -= TWO_MANT_DIG
            if z > y:
                z -= 1.0
    elif z < 0.0:
        if z > -0.5:
            z = -0.0
        elif z > -TWO_MANT_DIG:
            z -= 0.5
            y = z
            z -= TWO_MANT_DIG
            z += TWO_MANT_DIG
            if z < y:
                z += 1.0
    return z
