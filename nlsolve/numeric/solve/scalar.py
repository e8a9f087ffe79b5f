"""
Find a root of a single-variable equation :math:`f(x) = 0` using one of
four classical methods:

    - Bisection (halving a bracketing interval).
    - Fixed-point (simple) iteration :math:`x' = x - f(x) / \\sigma`.
    - Newton-Raphson, using a finite-difference derivative.
    - Secant.

Each method returns the root together with the complete `StepTrace` of
the iterations used to reach it.  The bisection, fixed-point and secant
methods report their result rounded *upwards* to a number of digits
derived from the requested precision (see `display_digits` and
`ceil_round`); Newton-Raphson reports the unrounded value.
"""
from __future__ import annotations

import operator
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Protocol

import numpy as np

from nlsolve.numeric.math_ext import ceil_round, display_digits
from nlsolve.numeric.solve.exception import (
    ConvergenceError, DegenerateSecantError, InvalidSelectorError,
    NarrowIntervalError, NonConvergenceError, SignError,
    ZeroDerivativeError)
from nlsolve.numeric.solve.trace import ScalarStep, StepTrace
from nlsolve.options import resolve_options

# Last updated: 19 October 2026.


# ======================================================================

class _Equation(Protocol):
    def value(self, x: float) -> float: ...

    def derivative(self, x: float, order: int = 1) -> float: ...


class Method(IntEnum):
    """Scalar root finding methods, valued by their wire id."""
    BISECTION = 0
    FIXED_POINT = 1
    NEWTON = 2
    SECANT = 3


def select_method(method_id: int) -> Method:
    """
    Convert a method id to a `Method`.

    Raises
    ------
    InvalidSelectorError
        If `method_id` is not one of the `Method` values.
    """
    try:
        return Method(operator.index(method_id))
    except (TypeError, ValueError):
        raise InvalidSelectorError(
            f"Invalid method id: {method_id!r}.") from None


@dataclass(frozen=True, kw_only=True)
class ScalarResult:
    # noinspection PyUnresolvedReferences
    """
    Result of a scalar root search.

    Parameters
    ----------
    method : Method
        Method used.
    root : float
        Root estimate (unrounded).
    fx : float
        Function value at `root` (unrounded).
    iterations : int
        Number of iterations performed (equal to ``len(steps)``).
    error_value : float
        Final step difference (bisection: final bracket width).
    digits : int or None
        Decimal places used for `display_root` / `display_fx`, or
        ``None`` if the result is reported unrounded (Newton-Raphson).
    steps : StepTrace
        Complete record of the iterations.
    """
    method: Method
    root: float
    fx: float
    iterations: int
    error_value: float
    digits: int | None
    steps: StepTrace

    @property
    def display_root(self) -> float:
        """`root` ceiling-rounded to `digits` (if given)."""
        if self.digits is None:
            return self.root
        return ceil_round(self.root, self.digits)

    @property
    def display_fx(self) -> float:
        """`fx` ceiling-rounded to `digits` (if given)."""
        if self.digits is None:
            return self.fx
        return ceil_round(self.fx, self.digits)

    def as_dict(self) -> dict[str, Any]:
        """Reported values in the form used by request payloads."""
        return {'method_id': int(self.method),
                'root': self.display_root,
                'function_value': self.display_fx,
                'error_value': self.error_value,
                'iterations': self.iterations,
                'steps': self.steps.as_list()}


# ----------------------------------------------------------------------

def _check_estimate(estimate: float):
    if not estimate > 0:
        raise ValueError(f"estimate must be positive, got {estimate}.")


def _check_bracket(equation: _Equation, left: float, right: float):
    f_left, f_right = equation.value(left), equation.value(right)
    if not f_left * f_right < 0:
        raise SignError("Function values at the interval endpoints must "
                        "have opposite signs.", left=left, right=right,
                        f_left=f_left, f_right=f_right)


def _check_finite(x: float, it: int, steps: StepTrace):
    if not np.isfinite(x):
        raise NonConvergenceError(f"Iterate became non-finite after {it} "
                                  f"iterations.", x=x, steps=steps)


def _check_maxits(it: int, maxits: int, x: float, steps: StepTrace):
    if it >= maxits:
        raise NonConvergenceError(f"Reached {maxits} iteration limit.",
                                  details="Reached maxits.", x=x,
                                  steps=steps)


# ======================================================================

def bisection(equation: _Equation, left: float, right: float,
              estimate: float, *, maxits: int = None,
              verbose: bool = None) -> ScalarResult:
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [left, right]` by the bisection method.  :math:`f(x)` must change
    sign across the interval.

    Examples
    --------
    >>> from nlsolve.equations import scalar_equation
    >>> res = bisection(scalar_equation(1), -3.0, -1.0, 1e-4)
    >>> res.display_root
    -1.7963

    Parameters
    ----------
    equation : ScalarEquation
        Equation to solve.
    left, right : float
        Each end of the search interval.
    estimate : float
        Stop when the bracket width :math:`|b - a| <` `estimate`.
    maxits : int, optional
        Iteration limit (default from `SolverOptions`).
    verbose : bool, optional
        If True, print progress statements (default from
        `SolverOptions`).

    Returns
    -------
    result : ScalarResult
        Root is the last midpoint; `error_value` is the final bracket
        width.

    Raises
    ------
    SignError
        If :math:`f(left) f(right) \ge 0` or is NaN.
    NonConvergenceError
        If `maxits` is reached before a solution is found.
    """
    maxits, verbose = resolve_options(maxits, verbose)
    _check_estimate(estimate)
    _check_bracket(equation, left, right)

    if verbose:
        print(f"Bisection:")

    a, b = left, right
    steps = StepTrace()
    it = 0
    while True:
        _check_maxits(it, maxits, (a + b) / 2, steps)

        x = (a + b) / 2
        f_a, f_b, f_x = equation.value(a), equation.value(b), equation.value(x)
        steps.append(ScalarStep(iteration=it, a=a, b=b, x=x, fa=f_a,
                                fb=f_b, fx=f_x, abs_diff=abs(b - a)))

        if verbose:
            print(f"... Iteration {it}: x = [{a}, {x}, {b}], "
                  f"f = [{f_a}, {f_x}, {f_b}]")

        # Keep the half where the sign changes.
        if f_a * f_x > 0:
            a = x
        else:
            b = x
        it += 1

        if abs(b - a) < estimate:
            if verbose:
                print(f"... Converged.")

            return ScalarResult(method=Method.BISECTION, root=x, fx=f_x,
                                iterations=it, error_value=abs(b - a),
                                digits=display_digits(estimate),
                                steps=steps)


def fixed_point(equation: _Equation, left: float, right: float,
                estimate: float, *, maxits: int = None,
                verbose: bool = None) -> ScalarResult:
    r"""
    Find a root of :math:`f(x) = 0` on :math:`[left, right]` by simple
    iteration of the map:

    .. math:: x_{k+1} = x_k - \frac{f(x_k)}{\sigma}, \quad
              \sigma = \max(|f'(left)|, |f'(right)|)

    Iteration starts from whichever end has the larger :math:`|f'|`
    (`right` on a tie).

    Parameters
    ----------
    equation : ScalarEquation
        Equation to solve.
    left, right : float
        Ends of an interval over which :math:`f(x)` changes sign.
    estimate : float
        Stop when :math:`|x_{k+1} - x_k| <` `estimate`.
    maxits, verbose : optional
        See `bisection`.

    Returns
    -------
    result : ScalarResult

    Raises
    ------
    SignError
        If :math:`f(left) f(right) \ge 0` or is NaN.
    ConvergenceError
        If :math:`1 - f'/\sigma \ge 1` at both ends, i.e. the map is not
        a contraction.
    NarrowIntervalError
        If a step is larger than the one before it.  The method only
        converges in a small neighbourhood of the root, so a narrower
        interval should be tried.
    NonConvergenceError
        If `maxits` is reached or the iterate is no longer finite.
    """
    maxits, verbose = resolve_options(maxits, verbose)
    _check_estimate(estimate)
    _check_bracket(equation, left, right)

    df_left = equation.derivative(left, 1)
    df_right = equation.derivative(right, 1)
    sigma = max(abs(df_left), abs(df_right))
    x0 = left if abs(df_left) > abs(df_right) else right

    if (sigma == 0 or (1 - df_left / sigma >= 1 and
                       1 - df_right / sigma >= 1)):
        raise ConvergenceError("Method does not converge on this "
                               "interval.", df_left=df_left,
                               df_right=df_right, sigma=sigma)

    if verbose:
        print(f"Fixed Point Iteration (σ = {sigma:.6G}):")

    x, last_diff = x0, np.inf
    steps = StepTrace()
    it = 0
    while True:
        _check_maxits(it, maxits, x, steps)

        x_next = x - equation.value(x) / sigma
        _check_finite(x_next, it, steps)
        diff = abs(x_next - x)

        if diff > last_diff:
            raise NarrowIntervalError(
                "Narrow down the interval.  The method converges only in "
                "a small neighbourhood of the root.", x=x, x_next=x_next,
                abs_diff=diff, last_diff=last_diff, steps=steps)

        fx_next = equation.value(x_next)
        steps.append(ScalarStep(iteration=it, x=x, x_next=x_next,
                                fx_next=fx_next, abs_diff=diff))

        if verbose:
            print(f"... Iteration {it}: x = {x_next}, |Δx| = {diff:.5G}")

        it += 1
        if diff < estimate:
            if verbose:
                print(f"... Converged.")

            return ScalarResult(method=Method.FIXED_POINT, root=x_next,
                                fx=fx_next, iterations=it,
                                error_value=diff,
                                digits=display_digits(estimate),
                                steps=steps)

        x, last_diff = x_next, diff


def newton(equation: _Equation, left: float, right: float,
           estimate: float, *, maxits: int = None,
           verbose: bool = None) -> ScalarResult:
    r"""
    Find a root of :math:`f(x) = 0` using the Newton-Raphson method with
    a forward-difference derivative.

    The starting point is `right` if :math:`f(right) f'(right) > 0`,
    otherwise `left`.  This is a rough heuristic and does not guarantee
    convergence; a `RuntimeWarning` is issued if the chosen point does
    not satisfy :math:`f(x_0) f''(x_0) > 0`.

    Parameters
    ----------
    equation : ScalarEquation
        Equation to solve.
    left, right : float
        Ends of an interval over which :math:`f(x)` changes sign.
    estimate : float
        Stop when both :math:`|x - x_0| \le` `estimate` and
        :math:`|f(x)| <` `estimate`.
    maxits, verbose : optional
        See `bisection`.

    Returns
    -------
    result : ScalarResult
        The root is *not* rounded (``digits = None``).  Iterations are
        numbered from 1.

    Raises
    ------
    SignError
        If :math:`f(left) f(right) \ge 0` or is NaN.
    ZeroDerivativeError
        If :math:`f'(x_0) = 0` at any iterate.
    NonConvergenceError
        If `maxits` is reached or the iterate is no longer finite.
    """
    maxits, verbose = resolve_options(maxits, verbose)
    _check_estimate(estimate)
    _check_bracket(equation, left, right)

    if equation.value(right) * equation.derivative(right, 1) > 0:
        x0 = right
    else:
        x0 = left

    if not equation.value(x0) * equation.derivative(x0, 2) > 0:
        warnings.warn(f"Starting point x0 = {x0} does not satisfy "
                      f"f(x0)·f''(x0) > 0, convergence is not assured.",
                      RuntimeWarning)

    if verbose:
        print(f"Newton-Raphson:")

    steps = StepTrace()
    it = 0
    while True:
        _check_maxits(it, maxits, x0, steps)
        it += 1

        f_x0 = equation.value(x0)
        df_x0 = equation.derivative(x0, 1)
        if df_x0 == 0:
            raise ZeroDerivativeError(
                "First derivative is zero, refine the input interval.",
                x=x0, fx=f_x0, iterations=it, steps=steps)

        x = x0 - f_x0 / df_x0
        _check_finite(x, it, steps)
        diff = abs(x - x0)
        steps.append(ScalarStep(iteration=it, x=x0, fx=f_x0, dfx=df_x0,
                                x_next=x, abs_diff=diff))

        if verbose:
            print(f"... Iteration {it}: x = {x}, |Δx| = {diff:.5G}")

        f_x = equation.value(x)
        if diff <= estimate and abs(f_x) < estimate:
            break

        x0 = x

    if verbose:
        print(f"... Converged.")

    return ScalarResult(method=Method.NEWTON, root=x, fx=f_x,
                        iterations=it, error_value=diff, digits=None,
                        steps=steps)


def secant(equation: _Equation, left: float, right: float,
           estimate: float, *, maxits: int = None,
           verbose: bool = None) -> ScalarResult:
    r"""
    Find a root of :math:`f(x) = 0` using the secant method:

    .. math:: x_2 = x_1 - f(x_1) \frac{x_1 - x_0}{f(x_1) - f(x_0)}

    `left` and `right` are used as the two starting points
    :math:`x_0, x_1`; they need not bracket the root.

    Parameters
    ----------
    equation : ScalarEquation
        Equation to solve.
    left, right : float
        Starting points :math:`x_0` and :math:`x_1`.
    estimate : float
        Stop when :math:`|x_2 - x_1| <` `estimate`.
    maxits, verbose : optional
        See `bisection`.

    Returns
    -------
    result : ScalarResult

    Raises
    ------
    DegenerateSecantError
        If :math:`|f(x_1) - f(x_0)|` does not exceed machine epsilon at
        the start, or becomes exactly zero during iteration.
    NonConvergenceError
        If `maxits` is reached or the iterate is no longer finite.
    """
    maxits, verbose = resolve_options(maxits, verbose)
    _check_estimate(estimate)

    x0, x1 = left, right
    df = equation.value(x1) - equation.value(x0)
    if not abs(df) > np.finfo(float).eps:
        raise DegenerateSecantError("Denominator too small, secant method "
                                    "cannot proceed.", x0=x0, x1=x1)

    if verbose:
        print(f"Secant:")

    steps = StepTrace()
    it = 0
    while True:
        _check_maxits(it, maxits, x1, steps)

        f_x0, f_x1 = equation.value(x0), equation.value(x1)
        if f_x1 == f_x0:
            raise DegenerateSecantError("Denominator became zero, secant "
                                        "method cannot proceed.", x0=x0,
                                        x1=x1, steps=steps)

        x2 = x1 - f_x1 * (x1 - x0) / (f_x1 - f_x0)
        _check_finite(x2, it, steps)
        diff = abs(x2 - x1)
        f_x2 = equation.value(x2)
        steps.append(ScalarStep(iteration=it, x_prev=x0, x=x1, x_next=x2,
                                fx_next=f_x2, abs_diff=diff))

        if verbose:
            print(f"... Iteration {it}: x = {x2}, |Δx| = {diff:.5G}")

        it += 1
        if diff < estimate:
            if verbose:
                print(f"... Converged.")

            return ScalarResult(method=Method.SECANT, root=x2, fx=f_x2,
                                iterations=it, error_value=diff,
                                digits=display_digits(estimate),
                                steps=steps)

        x0, x1 = x1, x2


# ======================================================================

_METHODS: dict[Method, Callable[..., ScalarResult]] = {
    Method.BISECTION: bisection,
    Method.FIXED_POINT: fixed_point,
    Method.NEWTON: newton,
    Method.SECANT: secant,
}


class ScalarRootSolver:
    """
    Solve :math:`f(x) = 0` for a given equation using a selected
    `Method`.

    A solver is used for exactly one root search: `solve` may only be
    called once and a new solver must be constructed for each request.

    Parameters
    ----------
    equation : ScalarEquation
        Equation to solve.
    method : Method or int
        Method (or method id) to use.
    maxits : int, optional
        Iteration limit (default from `SolverOptions`).
    verbose : bool, optional
        If True, print progress (default from `SolverOptions`).

    Raises
    ------
    InvalidSelectorError
        If `method` is not a valid method id.

    Examples
    --------
    >>> from nlsolve.equations import scalar_equation
    >>> solver = ScalarRootSolver(scalar_equation(2), Method.NEWTON)
    >>> round(solver.solve(1.0, 2.0, 1e-6).root, 4)
    1.6094
    """

    def __init__(self, equation: _Equation, method: Method | int, *,
                 maxits: int = None, verbose: bool = None):
        self.equation = equation
        self.method = select_method(method)
        self.maxits, self.verbose = maxits, verbose
        self._used = False

    def solve(self, left: float, right: float,
              estimate: float) -> ScalarResult:
        """
        Run the selected method.  For the secant method `left` and
        `right` are the two starting points.  See `bisection`,
        `fixed_point`, `newton` and `secant` for details.

        Raises
        ------
        RuntimeError
            If this solver has already been used.
        SolverError
            (or subclasses) from the method on failure.
        """
        if self._used:
            raise RuntimeError("ScalarRootSolver can only be used once, "
                               "create a new solver for each request.")
        self._used = True

        return _METHODS[self.method](self.equation, left, right, estimate,
                                     maxits=self.maxits,
                                     verbose=self.verbose)
