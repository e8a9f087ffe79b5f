from dataclasses import FrozenInstanceError
from unittest import TestCase

import numpy as np


# ======================================================================

class TestScalarCatalog(TestCase):
    def test_values(self):
        from nlsolve.equations import ScalarEquationId, scalar_equation

        self.assertEqual(len(ScalarEquationId), 4)
        self.assertAlmostEqual(scalar_equation(0).value(1.0),
                               1.62 - 8.15 + 4.39 + 4.29)
        self.assertEqual(scalar_equation(1).value(2.0), 10.0)
        self.assertAlmostEqual(scalar_equation(2).value(np.log(5.0)), 0.0)
        self.assertAlmostEqual(scalar_equation(3).value(0.0), np.pi / 4)

        for eq_id in ScalarEquationId:
            eq = scalar_equation(eq_id)
            self.assertEqual(eq.eq_id, int(eq_id))
            self.assertIsInstance(eq.value(0.5), float)

        self.assertIs(scalar_equation(1), scalar_equation(1))
        self.assertEqual(str(scalar_equation(1)), 'x³ - x + 4')

    def test_derivatives(self):
        from nlsolve.equations import scalar_equation

        # x³ - x + 4: f' = 3x² - 1, f'' = 6x.
        eq = scalar_equation(1)
        self.assertAlmostEqual(eq.derivative(2.0), 11.0, places=3)
        self.assertAlmostEqual(eq.derivative(2.0, 1), 11.0, places=3)
        self.assertAlmostEqual(eq.derivative(2.0, 2), 12.0, delta=0.01)

        # Exactly the forward difference with h = 1e-5.
        h = 1e-5
        self.assertEqual(eq.derivative(-1.5),
                         (eq.value(-1.5 + h) - eq.value(-1.5)) / h)

        for order in (0, 3):
            with self.assertRaises(ValueError):
                eq.derivative(1.0, order)

    def test_invalid_ids(self):
        from nlsolve.equations import scalar_equation
        from nlsolve.numeric.solve.exception import InvalidSelectorError

        for eq_id in (-1, 4, 1.5, '1', None):
            with self.subTest(eq_id=eq_id):
                with self.assertRaises(InvalidSelectorError):
                    scalar_equation(eq_id)

    def test_custom(self):
        from nlsolve.equations import ScalarEquation

        eq = ScalarEquation(lambda x: x ** 2 - 2.0, label='x² - 2', h=1e-6)
        self.assertIsNone(eq.eq_id)
        self.assertEqual(eq.value(2.0), 2.0)
        self.assertAlmostEqual(eq.derivative(1.0), 2.0, places=4)

        with self.assertRaises(FrozenInstanceError):
            eq.h = 1.0  # noqa

        with self.assertRaises(ValueError):
            ScalarEquation(lambda x: x, h=0.0)


class TestSystemCatalog(TestCase):
    def test_values(self):
        from nlsolve.equations import SystemId, equation_system

        self.assertEqual(len(SystemId), 3)
        self.assertEqual(equation_system(0).value(1.0, 1.0), (-2.0, -2.0))
        g1, g2 = equation_system(1).value(0.0, 0.0)
        self.assertAlmostEqual(g1, -0.15)
        self.assertAlmostEqual(g2, 0.17)
        g1, g2 = equation_system(2).value(-1.0, 0.0)
        self.assertAlmostEqual(g1, -1.0)
        self.assertAlmostEqual(g2, -0.6)

        jac = equation_system(0).jacobian(1.0, 1.0)
        np.testing.assert_allclose(jac, [[2.0, 2.0], [-6.0, 1.0]],
                                   atol=1e-3)

    def test_invalid_ids(self):
        from nlsolve.equations import equation_system
        from nlsolve.numeric.solve.exception import InvalidSelectorError

        for eq_id in (-1, 3, 2.0):
            with self.subTest(eq_id=eq_id):
                with self.assertRaises(InvalidSelectorError):
                    equation_system(eq_id)


class TestOverflow(TestCase):
    def test_non_finite_values(self):
        from nlsolve.equations import equation_system, scalar_equation

        self.assertEqual(scalar_equation(1).value(1e200), np.inf)
        self.assertEqual(scalar_equation(1).value(-1e200), -np.inf)
        self.assertTrue(np.isnan(scalar_equation(0).value(1e200)))
        self.assertEqual(scalar_equation(2).value(1e4), np.inf)
        self.assertEqual(equation_system(0).value(1e160, 1e160),
                         (np.inf, -np.inf))
        self.assertTrue(np.isnan(scalar_equation(1).derivative(1e200)))
