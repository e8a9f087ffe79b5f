from unittest import TestCase

import numpy as np
from scipy.optimize import brentq


# ======================================================================

class TestSecant(TestCase):
    def test_exponential(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import Method, secant

        res = secant(scalar_equation(2), 1.0, 2.0, 1e-6)

        self.assertIs(res.method, Method.SECANT)
        self.assertAlmostEqual(res.root, np.log(5.0), places=6)
        self.assertEqual(res.digits, 6)
        self.assertEqual(res.display_root, 1.609438)
        self.assertEqual(res.iterations, len(res.steps))

        # Each step shifts (x0, x1) <- (x1, x2).
        self.assertEqual(res.steps[0].x_prev, 1.0)
        self.assertEqual(res.steps[0].x, 2.0)
        for s_prev, s_next in zip(res.steps[:-1], res.steps[1:]):
            self.assertEqual(s_next.x_prev, s_prev.x)
            self.assertEqual(s_next.x, s_prev.x_next)

    def test_no_bracket_needed(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.scalar import secant

        # f(-2.5) and f(-2) are both negative.
        eq = scalar_equation(1)
        res = secant(eq, -2.5, -2.0, 1e-8)
        self.assertAlmostEqual(res.root,
                               brentq(eq.value, -3.0, -1.0, xtol=1e-14),
                               places=7)

    def test_degenerate(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import DegenerateSecantError
        from nlsolve.numeric.solve.scalar import secant

        with self.assertRaises(DegenerateSecantError) as cm:
            secant(scalar_equation(2), 1.5, 1.5, 1e-6)
        self.assertEqual(cm.exception.flag, 5)

        # Symmetric points on an even function.
        from nlsolve.equations import ScalarEquation
        with self.assertRaises(DegenerateSecantError):
            secant(ScalarEquation(lambda x: x ** 2 - 1), -3.0, 3.0, 1e-6)

    def test_iteration_limit(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import NonConvergenceError
        from nlsolve.numeric.solve.scalar import secant

        with self.assertRaises(NonConvergenceError) as cm:
            secant(scalar_equation(2), 1.0, 2.0, 1e-12, maxits=2)
        self.assertEqual(len(cm.exception.steps), 2)

    def test_overflow(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import DegenerateSecantError
        from nlsolve.numeric.solve.scalar import secant

        # f = inf at both starting points.
        with self.assertRaises(DegenerateSecantError):
            secant(scalar_equation(1), 1e120, 2e120, 1e-6)
