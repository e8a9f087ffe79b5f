"""
Solve a pair of nonlinear equations :math:`g_1(x, y) = 0`, :math:`g_2(x,
y) = 0` by Newton's method, using a forward-difference Jacobian and
Cramer's rule for the 2x2 correction.  Convergence is local only; the
caller supplies a starting point sufficiently close to the solution.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np

from nlsolve.numeric.differentiate import JACOBIAN_STEP, forward_jacobian
from nlsolve.numeric.math_ext import solve_2x2
from nlsolve.numeric.solve.exception import (NonConvergenceError,
                                             SingularJacobianError)
from nlsolve.numeric.solve.trace import StepTrace, SystemStep
from nlsolve.options import resolve_options

# Last updated: 19 October 2026.


# ======================================================================

class _System(Protocol):
    def value(self, x: float, y: float) -> tuple[float, float]: ...


@dataclass(frozen=True, kw_only=True)
class SystemResult:
    # noinspection PyUnresolvedReferences
    """
    Result of a two-variable Newton solution.

    Parameters
    ----------
    x, y : float
        Converged point.
    g1, g2 : float
        Residuals at `(x, y)`.
    iterations : int
        Value of the iteration counter at convergence.  The counter
        starts at zero and is incremented after each update that did
        *not* converge, so it is one less than ``len(steps)``.
    error_value : float
        Length of the final update :math:`\\|\\Delta\\|_2`.
    steps : StepTrace
        Complete record of the iterations.
    """
    x: float
    y: float
    g1: float
    g2: float
    iterations: int
    error_value: float
    steps: StepTrace

    def as_dict(self) -> dict[str, Any]:
        return {'x': self.x, 'y': self.y,
                'function_values': [self.g1, self.g2],
                'iterations': self.iterations,
                'error_value': self.error_value,
                'steps': self.steps.as_list()}


# ----------------------------------------------------------------------

class BivariateNewtonSolver:
    """
    Newton's method for two equations in two unknowns.  Each iteration:

        1. Estimates the Jacobian :math:`J` at :math:`(x_0, y_0)` by
           forward differences with step `h`.
        2. Stops with `SingularJacobianError` if :math:`\\det J = 0`.
        3. Solves :math:`J \\Delta = -g(x_0, y_0)` by Cramer's rule.
        4. Updates :math:`(x_0, y_0) \\leftarrow (x_0, y_0) + \\Delta`.
        5. Finishes if :math:`\\|\\Delta\\|_2 <` `tolerance`.

    The solver holds the current point and iteration counter, so it is
    consumed by a single call to `solve`.

    Parameters
    ----------
    x0, y0 : float
        Starting point.
    tolerance : float
        Stop when the update length is less than this value (> 0).
    system : EquationSystem
        System to solve.
    h : float, default = JACOBIAN_STEP
        Finite-difference step for the Jacobian.
    maxits : int, optional
        Iteration limit (default from `SolverOptions`).
    verbose : bool, optional
        If True, print progress (default from `SolverOptions`).

    Examples
    --------
    >>> from nlsolve.equations import equation_system
    >>> res = BivariateNewtonSolver(1.0, 1.0, 1e-4,
    ...                             equation_system(0)).solve()
    >>> round(res.x, 3), round(res.y, 3)
    (0.783, 1.84)
    """

    def __init__(self, x0: float, y0: float, tolerance: float,
                 system: _System, *, h: float = JACOBIAN_STEP,
                 maxits: int = None, verbose: bool = None):
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got "
                             f"{tolerance}.")
        if not h > 0:
            raise ValueError("Require h > 0.")

        self.x0, self.y0 = float(x0), float(y0)
        self.tolerance = tolerance
        self.system = system
        self.h = h
        self.maxits, self.verbose = resolve_options(maxits, verbose)
        self.counter = 0
        self._used = False

    def solve(self) -> SystemResult:
        """
        Iterate from the current point until converged.

        Raises
        ------
        RuntimeError
            If this solver has already been used.
        SingularJacobianError
            If the Jacobian determinant is zero at any iterate.
        NonConvergenceError
            If `maxits` updates are made without converging, or the
            point is no longer finite.
        """
        if self._used:
            raise RuntimeError("BivariateNewtonSolver can only be used "
                               "once, create a new solver for each "
                               "request.")
        self._used = True

        if self.verbose:
            print(f"Newton's Method - Solving 2 Equations:")

        steps = StepTrace()
        while True:
            if self.counter >= self.maxits:
                raise NonConvergenceError(
                    f"Reached {self.maxits} iteration limit.",
                    details="Reached maxits.", x=self.x0, y=self.y0,
                    steps=steps)

            jac = forward_jacobian(self.system.value, self.x0, self.y0,
                                   self.h)
            det = jac[0, 0] * jac[1, 1] - jac[0, 1] * jac[1, 0]
            if det == 0:
                raise SingularJacobianError(
                    "Jacobian determinant is zero, system does not meet "
                    "the sufficient condition for convergence.",
                    x=self.x0, y=self.y0, steps=steps)

            g1, g2 = self.system.value(self.x0, self.y0)
            dx, dy = solve_2x2(jac, (-g1, -g2))
            x1, y1 = self.x0 + dx, self.y0 + dy
            if not (np.isfinite(x1) and np.isfinite(y1)):
                raise NonConvergenceError(
                    f"Point became non-finite after {self.counter} "
                    f"iterations.", x=x1, y=y1, steps=steps)

            estimate = float(np.hypot(x1 - self.x0, y1 - self.y0))
            steps.append(SystemStep(
                iteration=self.counter, x=self.x0, y=self.y0, g1=g1, g2=g2,
                jacobian=tuple(tuple(float(v) for v in row) for row in jac),
                det=float(det), x_next=x1, y_next=y1, abs_diff=estimate))

            if self.verbose:
                print(f"... Iteration {self.counter}: x, y = {x1:.6G}, "
                      f"{y1:.6G}, ||Δ|| = {estimate:.5G}")

            self.x0, self.y0 = x1, y1
            if estimate < self.tolerance:
                if self.verbose:
                    print(f"... Converged.")

                g1, g2 = self.system.value(x1, y1)
                return SystemResult(x=x1, y=y1, g1=g1, g2=g2,
                                    iterations=self.counter,
                                    error_value=estimate, steps=steps)

            self.counter += 1
