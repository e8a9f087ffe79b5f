from unittest import TestCase

from scipy.optimize import brentq

from .scalar_tst_functions import CATALOG_BRACKETS


# ======================================================================

class TestBisection(TestCase):
    def test_cubic(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import Method, bisection

        # x³ - x + 4 on [-3, -1].
        eq = scalar_equation(1)
        res = bisection(eq, -3.0, -1.0, 0.0001)
        exact = brentq(eq.value, -3.0, -1.0, xtol=1e-14)

        self.assertIs(res.method, Method.BISECTION)
        self.assertAlmostEqual(res.root, -1.7963, places=3)
        self.assertLess(abs(res.root - exact), 0.0001)
        self.assertLess(abs(res.fx), 0.01)
        self.assertLess(res.error_value, 0.0001)

        # Reported values are rounded upwards to 4 digits.
        self.assertEqual(res.digits, 4)
        self.assertEqual(res.display_root, -1.7963)
        self.assertGreaterEqual(res.display_fx, res.fx)

        self.assertEqual(res.iterations, 15)
        self.assertEqual(len(res.steps), res.iterations)
        self.assertEqual([s.iteration for s in res.steps],
                         list(range(15)))

    def test_bracket_halves(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import bisection

        res = bisection(scalar_equation(1), -3.0, -1.0, 0.0001)
        widths = [s.abs_diff for s in res.steps]
        self.assertEqual(widths[0], 2.0)
        for w_prev, w_next in zip(widths[:-1], widths[1:]):
            self.assertEqual(w_next, w_prev / 2)

        # Every recorded bracket keeps the sign change.
        for s in res.steps:
            self.assertLess(s.fa * s.fb, 0)
            self.assertEqual(s.x, (s.a + s.b) / 2)

    def test_catalog(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import bisection

        estimate = 1e-3
        for eq_id, (left, right) in CATALOG_BRACKETS.items():
            with self.subTest(eq_id=eq_id):
                eq = scalar_equation(eq_id)
                res = bisection(eq, left, right, estimate)
                exact = brentq(eq.value, left, right, xtol=1e-14)
                self.assertLess(abs(res.root - exact), estimate)
                self.assertLess(abs(res.fx), 10 * estimate)
                self.assertLess(res.error_value, estimate)

    def test_repeatable(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import bisection

        res_1 = bisection(scalar_equation(3), 1.9, 2.2, 1e-5)
        res_2 = bisection(scalar_equation(3), 1.9, 2.2, 1e-5)
        self.assertEqual(res_1.root, res_2.root)
        self.assertEqual(res_1.iterations, res_2.iterations)
        self.assertEqual(res_1.steps.as_list(), res_2.steps.as_list())

    def test_failures(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import (NonConvergenceError,
                                                     SignError)
        from nlsolve.numeric.solve.scalar import bisection

        eq = scalar_equation(1)

        # No sign change: f(0) = f(1) = 4.
        with self.assertRaises(SignError) as cm:
            bisection(eq, 0.0, 1.0, 1e-3)
        self.assertEqual(cm.exception.flag, 1)
        self.assertFalse(hasattr(cm.exception, 'steps'))

        # Iteration limit, with the partial trace attached.
        with self.assertRaises(NonConvergenceError) as cm:
            bisection(eq, -3.0, -1.0, 1e-6, maxits=3)
        self.assertEqual(cm.exception.flag, 7)
        self.assertEqual(len(cm.exception.steps), 3)

        # Precision beyond floating point resolution never converges.
        with self.assertRaises(NonConvergenceError):
            bisection(eq, -3.0, -1.0, 1e-20, maxits=200)

        with self.assertRaises(ValueError):
            bisection(eq, -3.0, -1.0, 0.0)


class TestScalarRootSolver(TestCase):
    def test_dispatch(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import Method, ScalarRootSolver

        for method_id in range(4):
            with self.subTest(method_id=method_id):
                solver = ScalarRootSolver(scalar_equation(2), method_id)
                self.assertIs(solver.method, Method(method_id))
                res = solver.solve(1.0, 2.0, 1e-5)
                self.assertIs(res.method, Method(method_id))
                self.assertAlmostEqual(res.root, 1.6094, places=3)

                # Single use only.
                with self.assertRaises(RuntimeError):
                    solver.solve(1.0, 2.0, 1e-5)

    def test_invalid_method(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import InvalidSelectorError
        from nlsolve.numeric.solve.scalar import ScalarRootSolver

        for method_id in (-1, 4, 2.0, 'newton'):
            with self.subTest(method_id=method_id):
                with self.assertRaises(InvalidSelectorError):
                    ScalarRootSolver(scalar_equation(2), method_id)
