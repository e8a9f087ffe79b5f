"""
.. This module acts as the top-level API documentation.

.. module: nlsolve

Iterative root finding for nonlinear equations, returning both the
answer and the full iteration trace used to reach it.

.. autosummary::
    :toctree: generated/

    equations
    numeric
    options
    service

"""

__version__ = "0.1.0"

import sys

# Last updated: 19 October 2026.

# ======================================================================

assert sys.version_info >= (3, 10)

from .equations import (EquationSystem, ScalarEquation, ScalarEquationId,
                        SystemId, equation_system, scalar_equation)
from .numeric.solve import (BivariateNewtonSolver, Method, ScalarResult,
                            ScalarRootSolver, SolverError, StepTrace,
                            SystemResult)
from .options import (SolverOptions, get_solver_options,
                      set_solver_options, solver_options)
from .service import (solve_equation, solve_equation_file, solve_system,
                      solve_system_file)
