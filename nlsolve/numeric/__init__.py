"""
Numeric (:mod:`nlsolve.numeric`)
================================

.. currentmodule:: nlsolve.numeric

Core numeric functions used throughout nlsolve.

.. autosummary::
    :toctree:

    solve
    differentiate
    math_ext

"""
from .differentiate import (FD_STEP, JACOBIAN_STEP, central_diff2,
                            forward_diff, forward_jacobian)
from .math_ext import ceil_round, display_digits, solve_2x2
