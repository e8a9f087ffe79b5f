"""
Finite Differences (:mod:`nlsolve.numeric.differentiate`)
=========================================================

.. currentmodule:: nlsolve.numeric.differentiate

Numeric derivatives using fixed-step finite differences.  Derivatives
in this package are never symbolic; callers must tolerate the
truncation error of the fixed step.
"""
from collections.abc import Callable

import numpy as np

# Last updated: 19 October 2026.

FD_STEP = 1e-5  # Scalar derivative step.
JACOBIAN_STEP = 1e-4  # Bivariate Jacobian step.


# ======================================================================

def forward_diff(func: Callable[[float], float], x: float,
                 h: float = FD_STEP) -> float:
    r"""
    First derivative by forward difference:

    .. math:: f'(x) \approx \frac{f(x + h) - f(x)}{h}

    Examples
    --------
    >>> round(forward_diff(lambda x: x ** 2, 3.0), 3)
    6.0
    """
    return (func(x + h) - func(x)) / h


def central_diff2(func: Callable[[float], float], x: float,
                  h: float = FD_STEP) -> float:
    r"""
    Second derivative by central difference:

    .. math:: f''(x) \approx \frac{f(x + h) - 2f(x) + f(x - h)}{h^2}

    .. note:: With `h` = 1e-5 the cancellation error in the numerator
       is amplified by :math:`1/h^2`, so only a few significant digits
       of the result are reliable.
    """
    return (func(x + h) - 2.0 * func(x) + func(x - h)) / (h * h)


def forward_jacobian(func: Callable[[float, float], tuple[float, float]],
                     x: float, y: float,
                     h: float = JACOBIAN_STEP) -> np.ndarray:
    """
    Estimate the 2x2 Jacobian of a two-component function
    ``(g1, g2) = func(x, y)`` by forward differences.

    Parameters
    ----------
    func : Callable[[float, float], (float, float)]
        Function returning both residuals at `(x, y)`.
    x, y : float
        Point at which the Jacobian is required.
    h : float, default = JACOBIAN_STEP
        Step used for both partial derivatives.

    Returns
    -------
    jac : ndarray, shape (2, 2)
        ``[[∂g1/∂x, ∂g1/∂y], [∂g2/∂x, ∂g2/∂y]]``.
    """
    g1, g2 = func(x, y)
    g1_xh, g2_xh = func(x + h, y)
    g1_yh, g2_yh = func(x, y + h)

    return np.array([[(g1_xh - g1) / h, (g1_yh - g1) / h],
                     [(g2_xh - g2) / h, (g2_yh - g2) / h]])
