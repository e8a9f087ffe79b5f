"""
Solver Options (:mod:`nlsolve.options`)
=======================================

.. currentmodule:: nlsolve.options

Package-wide defaults used by the solvers when `maxits` / `verbose` are
not given explicitly.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace

# Last updated: 19 October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Dataclass that holds the default settings for all solvers.  See
    `get_solver_options` and `set_solver_options` for full details.
    """
    maxits: int
    verbose: bool

    def __post_init__(self):
        """Check certain values"""
        if self.maxits < 1:
            raise ValueError("Require 'maxits' >= 1.")


# Create single instance and set defaults.
_solver_options = SolverOptions(
    maxits=1000,
    verbose=False
)


# ----------------------------------------------------------------------

def get_solver_options() -> SolverOptions:
    """
    Returns
    -------
    solver_options : SolverOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_solver_options`.
    """
    return replace(_solver_options)


# noinspection PyIncorrectDocstring
def set_solver_options(**kwargs):
    """
    Set the current solver options.

    Parameters
    ----------
    maxits : int, default = 1000
        Iteration limit applied to every solver.  Reaching this limit
        raises `NonConvergenceError` instead of iterating forever.

    verbose : bool, default = False
        If `True`, solvers print their progress at each iteration.

    See Also
    --------
    get_solver_options, solver_options

    Examples
    --------
    >>> set_solver_options(maxits=200)
    >>> get_solver_options().maxits
    200
    >>> set_solver_options(maxits=1000)
    """
    global _solver_options
    _solver_options = replace(_solver_options, **kwargs)


@contextmanager
def solver_options(**kwargs):
    """
    Context manager that applies `set_solver_options` for the duration
    of a ``with`` block, restoring the previous options afterwards (even
    if an exception is raised).

    Examples
    --------
    >>> with solver_options(verbose=True):
    ...     get_solver_options().verbose
    True
    >>> get_solver_options().verbose
    False
    """
    global _solver_options
    saved = _solver_options
    set_solver_options(**kwargs)
    try:
        yield get_solver_options()
    finally:
        _solver_options = saved


def resolve_options(maxits: int | None,
                    verbose: bool | None) -> tuple[int, bool]:
    """
    Fill in `maxits` and `verbose` from the current options where they
    are ``None``.
    """
    if maxits is None:
        maxits = _solver_options.maxits
    if verbose is None:
        verbose = _solver_options.verbose

    if maxits < 1:
        raise ValueError("maxits must be greater than 0")

    return maxits, verbose
