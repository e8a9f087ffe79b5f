"""
=====================================
Solvers (:mod:`nlsolve.numeric.solve`)
=====================================

.. currentmodule:: nlsolve.numeric.solve

Iterative root finding for single equations and for pairs of equations,
each returning the full trace of its iterations.

Scalar Equations
----------------

.. autosummary::
    :toctree:

    ScalarRootSolver
    ScalarResult
    Method
    select_method
    bisection
    fixed_point
    newton
    secant

Systems of Two Equations
------------------------

.. autosummary::
    :toctree:

    BivariateNewtonSolver
    SystemResult

Iteration Trace
---------------

.. autosummary::
    :toctree:

    StepTrace
    ScalarStep
    SystemStep

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    SignError
    ConvergenceError
    NarrowIntervalError
    ZeroDerivativeError
    DegenerateSecantError
    SingularJacobianError
    NonConvergenceError
    InvalidSelectorError

"""

from .bivariate import BivariateNewtonSolver, SystemResult
from .exception import (ConvergenceError, DegenerateSecantError,
                        InvalidSelectorError, NarrowIntervalError,
                        NonConvergenceError, SignError,
                        SingularJacobianError, SolverError,
                        ZeroDerivativeError)
from .scalar import (Method, ScalarResult, ScalarRootSolver, bisection,
                     fixed_point, newton, secant, select_method)
from .trace import ScalarStep, StepTrace, SystemStep
