import io
from contextlib import redirect_stdout
from unittest import TestCase


# ======================================================================

class TestSolverOptions(TestCase):
    def test_defaults(self):
        from nlsolve.options import get_solver_options

        opts = get_solver_options()
        self.assertEqual(opts.maxits, 1000)
        self.assertFalse(opts.verbose)

    def test_set_and_restore(self):
        from nlsolve.options import (get_solver_options,
                                     set_solver_options, solver_options)

        with solver_options(maxits=10) as opts:
            self.assertEqual(opts.maxits, 10)
            self.assertEqual(get_solver_options().maxits, 10)
        self.assertEqual(get_solver_options().maxits, 1000)

        # Restored even on error.
        with self.assertRaises(KeyError):
            with solver_options(verbose=True):
                raise KeyError
        self.assertFalse(get_solver_options().verbose)

        # Illegal values are rejected and leave options unchanged.
        with self.assertRaises(ValueError):
            set_solver_options(maxits=0)
        self.assertEqual(get_solver_options().maxits, 1000)

    def test_used_by_solvers(self):
        from nlsolve.equations import equation_system, scalar_equation
        from nlsolve.numeric.solve import (BivariateNewtonSolver, Method,
                                           NonConvergenceError,
                                           ScalarRootSolver)
        from nlsolve.options import solver_options

        with solver_options(maxits=3):
            with self.assertRaises(NonConvergenceError):
                ScalarRootSolver(scalar_equation(1),
                                 Method.BISECTION).solve(-3.0, -1.0, 1e-6)
            with self.assertRaises(NonConvergenceError):
                BivariateNewtonSolver(1.0, 1.0, 1e-12,
                                      equation_system(0)).solve()

        # Explicit arguments take precedence.
        with solver_options(maxits=3):
            res = ScalarRootSolver(scalar_equation(1), Method.BISECTION,
                                   maxits=100).solve(-3.0, -1.0, 1e-6)
        self.assertGreater(res.iterations, 3)

    def test_verbose(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve import bisection
        from nlsolve.options import solver_options

        out = io.StringIO()
        with redirect_stdout(out), solver_options(verbose=True):
            res = bisection(scalar_equation(1), -3.0, -1.0, 0.0001)

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Bisection:")
        self.assertTrue(lines[1].startswith("... Iteration 0:"))
        self.assertEqual(lines[-1], "... Converged.")
        self.assertEqual(len(lines), res.iterations + 2)
