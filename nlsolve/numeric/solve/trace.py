"""
Iteration trace records produced by every solver.  A `StepTrace` is
returned in full alongside each result so that the path to the root can
be tabulated or plotted.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import Any, Union

# Last updated: 19 October 2026.


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class ScalarStep:
    # noinspection PyUnresolvedReferences
    """
    One iteration of a scalar method.  Only `iteration`, `x` and
    `abs_diff` are always present; the remaining fields are filled in
    by the methods that use them.

    Parameters
    ----------
    iteration : int
        Iteration index.  Newton-Raphson counts from 1, the other
        methods from 0.
    x : float
        Current iterate (bisection: bracket midpoint).
    abs_diff : float
        Absolute step difference (bisection: bracket width `|b - a|`).
    fx : float, optional
        Function value at `x`.
    dfx : float, optional
        First derivative at `x` (Newton-Raphson).
    x_prev : float, optional
        Previous iterate (secant).
    x_next, fx_next : float, optional
        New iterate and its function value.
    a, b, fa, fb : float, optional
        Bracket ends and their function values (bisection).
    """
    iteration: int
    x: float
    abs_diff: float
    fx: float = None
    dfx: float = None
    x_prev: float = None
    x_next: float = None
    fx_next: float = None
    a: float = None
    b: float = None
    fa: float = None
    fb: float = None

    def as_dict(self) -> dict[str, Any]:
        """Fields as a `dict`, omitting those not used (``None``)."""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if getattr(self, f.name) is not None}


@dataclass(frozen=True, kw_only=True)
class SystemStep:
    # noinspection PyUnresolvedReferences
    """
    One iteration of the two-variable Newton method.

    Parameters
    ----------
    iteration : int
        Iteration index, counting from 0.
    x, y : float
        Point at the start of the iteration.
    g1, g2 : float
        Residuals at `(x, y)`.
    jacobian : ((float, float), (float, float))
        Finite-difference Jacobian at `(x, y)`.
    det : float
        Determinant of `jacobian`.
    x_next, y_next : float
        Updated point.
    abs_diff : float
        Euclidean length of the update.
    """
    iteration: int
    x: float
    y: float
    g1: float
    g2: float
    jacobian: tuple[tuple[float, float], tuple[float, float]]
    det: float
    x_next: float
    y_next: float
    abs_diff: float

    def as_dict(self) -> dict[str, Any]:
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d['jacobian'] = [list(row) for row in self.jacobian]
        return d


_Step = Union[ScalarStep, SystemStep]


# ----------------------------------------------------------------------

class StepTrace(Sequence):
    """
    Ordered, append-only log of iteration records.  Steps can be read
    by index or iteration but never replaced or removed.
    """

    def __init__(self):
        self._steps: list[_Step] = []

    def __getitem__(self, idx):
        return self._steps[idx]

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"StepTrace(n={len(self._steps)})"

    def append(self, step: _Step):
        """Add `step` to the end of the trace."""
        if not isinstance(step, (ScalarStep, SystemStep)):
            raise TypeError(f"Expected a step record, got "
                            f"{type(step).__name__}.")
        self._steps.append(step)

    def as_list(self) -> list[dict[str, Any]]:
        """All steps converted using their `as_dict()` method."""
        return [step.as_dict() for step in self._steps]
