"""Exact integer arithmetic helpers.

All values are plain Python ints; nothing is ever reduced modulo a prime
and nothing is ever rounded.
"""

from __future__ import annotations

import math
from typing import Tuple

from sharesolve.errors import InconsistentShares


def exact_div(numerator: int, denominator: int) -> int:
    """Divide, failing loudly unless the division leaves no remainder."""
    if denominator == 0:
        raise ZeroDivisionError("exact_div by zero")
    quotient, remainder = divmod(numerator, denominator)
    if remainder != 0:
        raise InconsistentShares(
            f"{numerator} is not divisible by {denominator}",
            numerator=numerator,
            denominator=denominator,
            remainder=remainder,
        )
    return quotient


def normalize(num: int, den: int) -> Tuple[int, int]:
    """Reduce num/den to lowest terms with a positive denominator."""
    if den == 0:
        raise ZeroDivisionError("normalize with zero denominator")
    if den < 0:
        num, den = -num, -den
    g = math.gcd(num, den)
    return num // g, den // g


def add_fraction(a: Tuple[int, int], b: Tuple[int, int]) -> Tuple[int, int]:
    """Sum of two fractions, in lowest terms."""
    an, ad = a
    bn, bd = b
    return normalize(an * bd + bn * ad, ad * bd)
