"""
Math Extensions (:mod:`nlsolve.numeric.math_ext`)
=================================================

.. currentmodule:: nlsolve.numeric.math_ext

Rounding conventions for reported results and the closed-form linear
solve used by the system solver.
"""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

# Last updated: 19 October 2026.

# Largest power of ten representable as a float.
_MAX_DIGITS = int(np.log10(np.finfo(float).max))


# ======================================================================

def display_digits(estimate: float) -> int:
    """
    Number of decimal digits used to report a result found to precision
    `estimate`, being ``max(1, ceil(|log10(estimate)|))``.

    Examples
    --------
    >>> display_digits(0.0001)
    4
    >>> display_digits(0.5)
    1
    >>> display_digits(1.0)
    1
    """
    if not estimate > 0:
        raise ValueError("estimate must be positive.")
    if not np.isfinite(estimate):
        raise ValueError("estimate must be finite.")

    return max(1, int(np.ceil(np.abs(np.log10(estimate)))))


def ceil_round(value: float, digits: int) -> float:
    """
    Round `value` *upwards* (towards +∞) to `digits` decimal places,
    i.e. ``ceil(value * 10**digits) / 10**digits``.  This is not
    nearest-rounding: negative values move towards zero and positive
    values away from it.

    `digits` beyond the float range (more than 308) is reduced to 308.
    If `value` still cannot be scaled without overflow, or is not
    finite, it is returned unchanged.

    Examples
    --------
    >>> ceil_round(1.23401, 3)
    1.235
    >>> ceil_round(-1.79639, 4)
    -1.7963
    """
    mult = 10.0 ** min(digits, _MAX_DIGITS)
    scaled = value * mult
    if not np.isfinite(scaled):
        return float(value)

    return float(np.ceil(scaled) / mult)


def solve_2x2(a: Sequence[Sequence[float]],
              b: Sequence[float]) -> tuple[float, float]:
    """
    Solve the 2x2 linear system ``a @ [u, v] = b`` by Cramer's rule.  No
    pivoting is done.

    Raises
    ------
    ValueError
        If the determinant of `a` is zero.

    Examples
    --------
    >>> solve_2x2([[2.0, 0.0], [0.0, 4.0]], [2.0, 2.0])
    (1.0, 0.5)
    """
    d = a[0][0] * a[1][1] - a[1][0] * a[0][1]
    if d == 0:
        raise ValueError("Determinant is zero, system has no unique "
                         "solution.")

    du = b[0] * a[1][1] - b[1] * a[0][1]
    dv = a[0][0] * b[1] - a[1][0] * b[0]
    return float(du / d), float(dv / d)
