"""Exact Lagrange interpolation over the integers.

API
---
interpolate(points, at)  -> f(at)
reconstruct(points)      -> f(0), the secret

f is the unique polynomial of degree < k through the k given points.  Each
Lagrange term y_i * prod(at - x_j) / prod(x_i - x_j) is kept as an exact
fraction and summed over a common denominator; only the total is required
to be an integer, so the single division happens at the end and any
remainder is reported as ``InconsistentShares``.

Coordinates must be ints.  Floats, bools and numeric strings are rejected
rather than coerced.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from sharesolve.crypto import exact
from sharesolve.errors import (
    DuplicateXCoordinate,
    InsufficientShares,
    InvalidIdentifier,
    InvalidValue,
)
from sharesolve.share import Share

__all__ = ["Share", "interpolate", "reconstruct"]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_share(pos: int, point: Tuple[int, int]) -> Share:
    x, y = point
    if not _is_int(x):
        raise InvalidIdentifier(f"Point {pos}: x={x!r} is not an integer", position=pos, identifier=repr(x))
    if not _is_int(y):
        raise InvalidValue(f"Point {pos}: y={y!r} is not an integer", position=pos, identifier=x, value=repr(y))
    return Share(x, y)


def interpolate(points: Iterable[Tuple[int, int]], at: int = 0) -> int:
    """Evaluate the interpolating polynomial of *points* at *at*."""
    pts: List[Share] = [_as_share(pos, p) for pos, p in enumerate(points)]
    k = len(pts)
    if k == 0:
        raise InsufficientShares("Need at least one point", k=0)
    if k == 1:
        # Constant polynomial: no division performed.
        return pts[0].y

    total = (0, 1)
    for i in range(k):
        xi, yi = pts[i]
        num = 1
        den = 1
        for j in range(k):
            if j == i:
                continue
            xj = pts[j].x
            if xi == xj:
                raise DuplicateXCoordinate(
                    f"Duplicate x-coordinate {xi} at positions {min(i, j)} and {max(i, j)}",
                    x=xi,
                )
            num *= at - xj      # (at - x_j)
            den *= xi - xj      # (x_i - x_j)
        total = exact.add_fraction(total, (yi * num, den))

    return exact.exact_div(*total)


def reconstruct(points: Iterable[Tuple[int, int]]) -> int:
    """Reconstruct the secret f(0) from *points* by Lagrange interpolation."""
    return interpolate(points, 0)
