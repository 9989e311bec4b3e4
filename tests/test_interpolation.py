import unittest

import numpy as np

from tabthermo.exceptions import InternalConsistencyError
from tabthermo.interpolation import interpolate, interpolate_many
from tabthermo.table import Table


class _DegenerateTable:
    """Table-like object with a repeated composition, bypassing validation."""

    points = [(0.0, 1.0), (0.5, 2.0), (0.5, 3.0), (1.0, 4.0)]

    def size(self):
        return len(self.points)

    def point_at(self, i):
        return self.points[i]

    def lower_bound(self, x):
        return 1


class TestInterpolation(unittest.TestCase):
    def test_exact_at_knots(self):
        table = Table.from_pairs([(0.0, -3.5), (0.2, 7.25), (0.55, 1.0), (1.0, 42.0)])
        for x, y in table.pairs():
            self.assertEqual(interpolate(table, x), y)

    def test_linear_between_knots(self):
        table = Table.from_pairs([(0.0, 0.0), (1.0, 10.0)])
        self.assertAlmostEqual(interpolate(table, 0.25), 2.5)
        self.assertAlmostEqual(interpolate(table, 0.5), 5.0)

    def test_clamps_outside_range(self):
        table = Table.from_pairs([(0.2, 5.0), (0.8, 9.0)])
        self.assertEqual(interpolate(table, 0.0), 5.0)
        self.assertEqual(interpolate(table, 1.0), 9.0)
        # Solvers may overshoot the physical range
        self.assertEqual(interpolate(table, -0.3), 5.0)
        self.assertEqual(interpolate(table, 1.7), 9.0)

    def test_piecewise(self):
        table = Table.from_pairs([(0.0, 100.0), (0.5, 150.0), (1.0, 100.0)])
        self.assertAlmostEqual(interpolate(table, 0.25), 125.0)
        self.assertAlmostEqual(interpolate(table, 0.9), 110.0)

    def test_nan_rejected(self):
        table = Table.from_pairs([(0.0, 0.0), (1.0, 10.0)])
        with self.assertRaises(ValueError):
            interpolate(table, float("nan"))

    def test_zero_width_bracket(self):
        with self.assertRaises(InternalConsistencyError):
            interpolate(_DegenerateTable(), 0.6)

    def test_interpolate_many(self):
        table = Table.from_pairs([(0.0, 0.0), (1.0, 10.0)])
        values = interpolate_many(table, [-1.0, 0.1, 0.6, 2.0])
        np.testing.assert_allclose(values, [0.0, 1.0, 6.0, 10.0])
        self.assertTrue(interpolate_many.__doc__)

if __name__ == '__main__':
    unittest.main()
