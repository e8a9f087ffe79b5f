"""
Equations (:mod:`nlsolve.equations`)
====================================

.. currentmodule:: nlsolve.equations

Immutable equation models used by the solvers, and the fixed catalogs
of equations / systems that can be selected by integer id.

Models
------

.. autosummary::
    :toctree:

    ScalarEquation
    EquationSystem

Catalogs
--------

.. autosummary::
    :toctree:

    ScalarEquationId
    SystemId
    scalar_equation
    equation_system
"""
from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from nlsolve.numeric.differentiate import (FD_STEP, JACOBIAN_STEP,
                                           central_diff2, forward_diff,
                                           forward_jacobian)
from nlsolve.numeric.solve.exception import InvalidSelectorError

# Last updated: 19 October 2026.


# ======================================================================

@dataclass(frozen=True)
class ScalarEquation:
    """
    Closed-form function of one variable :math:`f(x)` with numerically
    estimated derivatives.  Instances are read-only and may be shared
    between any number of solvers.

    Parameters
    ----------
    func : Callable[[float], float]
        The function :math:`f(x)`.
    label : str, default = 'f(x)'
        Readable form of the function.
    h : float, default = FD_STEP
        Finite-difference step used by `derivative`.
    eq_id : int, optional
        Catalog id, if this equation came from the catalog.

    Examples
    --------
    >>> eq = ScalarEquation(lambda x: x ** 2 - 2, label='x² - 2')
    >>> eq.value(3.0)
    7.0
    """
    func: Callable[[float], float]
    label: str = 'f(x)'
    h: float = FD_STEP
    eq_id: int = None

    def __post_init__(self):
        if not self.h > 0:
            raise ValueError("Require h > 0.")

    def __str__(self):
        return self.label

    def value(self, x: float) -> float:
        """
        Evaluate :math:`f(x)` in numpy float arithmetic, so that overflow
        gives ±inf (or NaN) instead of raising.  Non-finite values are
        left for the solvers to reject.
        """
        with np.errstate(over='ignore', invalid='ignore'):
            return float(self.func(np.float64(x)))

    def derivative(self, x: float, order: int = 1) -> float:
        """
        Estimate :math:`f'(x)` (``order=1``, forward difference) or
        :math:`f''(x)` (``order=2``, central difference) using step `h`.

        Raises
        ------
        ValueError
            If `order` is not 1 or 2.
        """
        if order == 1:
            return forward_diff(self.value, x, self.h)
        elif order == 2:
            return central_diff2(self.value, x, self.h)

        raise ValueError(f"Unsupported derivative order {order}, must be "
                         f"1 or 2.")


@dataclass(frozen=True)
class EquationSystem:
    """
    Pair of closed-form functions :math:`g_1(x, y) = 0`,
    :math:`g_2(x, y) = 0` solved simultaneously.

    Parameters
    ----------
    func : Callable[[float, float], (float, float)]
        Function returning both residuals.
    label : str, default = 'g(x, y)'
        Readable form of the system.
    eq_id : int, optional
        Catalog id, if this system came from the catalog.
    """
    func: Callable[[float, float], tuple[float, float]]
    label: str = 'g(x, y)'
    eq_id: int = None

    def __str__(self):
        return self.label

    def value(self, x: float, y: float) -> tuple[float, float]:
        """
        Evaluate :math:`(g_1(x, y), g_2(x, y))`.  As for
        `ScalarEquation.value`, overflow gives non-finite values.
        """
        with np.errstate(over='ignore', invalid='ignore'):
            g1, g2 = self.func(np.float64(x), np.float64(y))
        return float(g1), float(g2)

    def jacobian(self, x: float, y: float,
                 h: float = JACOBIAN_STEP) -> np.ndarray:
        """Forward-difference Jacobian at `(x, y)`, see
        `forward_jacobian`."""
        return forward_jacobian(self.value, x, y, h)


# ======================================================================

class ScalarEquationId(IntEnum):
    """Catalog ids of the scalar equations (zero based)."""
    EQ_1 = 0
    EQ_2 = 1
    EQ_3 = 2
    EQ_4 = 3


class SystemId(IntEnum):
    """Catalog ids of the equation systems (zero based)."""
    SYS_1 = 0
    SYS_2 = 1
    SYS_3 = 2


_SCALAR_CATALOG = {
    ScalarEquationId.EQ_1: ScalarEquation(
        lambda x: 1.62 * x ** 3 - 8.15 * x ** 2 + 4.39 * x + 4.29,
        label='1.62x³ - 8.15x² + 4.39x + 4.29', eq_id=0),
    ScalarEquationId.EQ_2: ScalarEquation(
        lambda x: x ** 3 - x + 4.0,
        label='x³ - x + 4', eq_id=1),
    ScalarEquationId.EQ_3: ScalarEquation(
        lambda x: np.exp(x) - 5.0,
        label='eˣ - 5', eq_id=2),
    ScalarEquationId.EQ_4: ScalarEquation(
        lambda x: np.sin(2.0 * x) + np.pi / 4.0,
        label='sin(2x) + π/4', eq_id=3),
}

_SYSTEM_CATALOG = {
    SystemId.SYS_1: EquationSystem(
        lambda x, y: (x ** 2 + y ** 2 - 4.0, -3.0 * x ** 2 + y),
        label='x² + y² - 4 = 0, -3x² + y = 0', eq_id=0),
    SystemId.SYS_2: EquationSystem(
        lambda x, y: (x ** 2 + x - y ** 2 - 0.15,
                      x ** 2 - y + y ** 2 + 0.17),
        label='x² + x - y² - 0.15 = 0, x² - y + y² + 0.17 = 0', eq_id=1),
    SystemId.SYS_3: EquationSystem(
        lambda x, y: (2.0 * y - np.cos(x + 1.0), x + np.sin(y) + 0.4),
        label='2y - cos(x + 1) = 0, x + sin(y) + 0.4 = 0', eq_id=2),
}


# ----------------------------------------------------------------------

def _select(enum_type: type[IntEnum], eq_id, what: str):
    try:
        return enum_type(operator.index(eq_id))
    except (TypeError, ValueError):
        raise InvalidSelectorError(f"Invalid {what} id: {eq_id!r}.") from None


def scalar_equation(eq_id: int) -> ScalarEquation:
    """
    Return the catalog equation with the given id.

    Raises
    ------
    InvalidSelectorError
        If `eq_id` is not one of `ScalarEquationId`.

    Examples
    --------
    >>> print(scalar_equation(1))
    x³ - x + 4
    """
    return _SCALAR_CATALOG[_select(ScalarEquationId, eq_id, 'equation')]


def equation_system(eq_id: int) -> EquationSystem:
    """
    Return the catalog system with the given id.

    Raises
    ------
    InvalidSelectorError
        If `eq_id` is not one of `SystemId`.
    """
    return _SYSTEM_CATALOG[_select(SystemId, eq_id, 'system of equations')]
