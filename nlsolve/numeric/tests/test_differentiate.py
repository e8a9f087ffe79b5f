from unittest import TestCase

import numpy as np


# ======================================================================

class TestFiniteDifferences(TestCase):
    def test_forward_diff(self):
        from nlsolve.numeric.differentiate import FD_STEP, forward_diff

        self.assertEqual(FD_STEP, 1e-5)
        self.assertAlmostEqual(forward_diff(lambda x: x ** 2, 3.0), 6.0,
                               places=4)
        self.assertAlmostEqual(forward_diff(np.exp, 0.0), 1.0, places=4)

        # Exactly the forward difference formula.
        h = 0.5
        self.assertEqual(forward_diff(lambda x: x ** 2, 1.0, h), 2.5)

    def test_central_diff2(self):
        from nlsolve.numeric.differentiate import central_diff2

        self.assertAlmostEqual(central_diff2(lambda x: x ** 3, 2.0), 12.0,
                               delta=1e-3)
        self.assertEqual(central_diff2(lambda x: x ** 2, 1.0, 0.5), 2.0)

    def test_forward_jacobian(self):
        from nlsolve.numeric.differentiate import (JACOBIAN_STEP,
                                                   forward_jacobian)

        self.assertEqual(JACOBIAN_STEP, 1e-4)

        def g(x, y):
            return x ** 2 + y ** 2 - 4.0, -3.0 * x ** 2 + y

        jac = forward_jacobian(g, 1.0, 1.0)
        self.assertEqual(jac.shape, (2, 2))
        np.testing.assert_allclose(jac, [[2.0, 2.0], [-6.0, 1.0]],
                                   atol=1e-3)
