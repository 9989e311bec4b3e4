import unittest

import numpy as np

from tabthermo.exceptions import InvalidTableError
from tabthermo.table import BELOW_RANGE, Table


class TestTable(unittest.TestCase):
    def setUp(self):
        self.table = Table.from_pairs([(0.1, 1.0), (0.4, 2.0), (0.9, 3.0)])

    def test_accessors(self):
        self.assertEqual(self.table.size(), 3)
        self.assertEqual(self.table.point_at(1), (0.4, 2.0))
        self.assertEqual(self.table.x_min, 0.1)
        self.assertEqual(self.table.x_max, 0.9)
        self.assertEqual(self.table.pairs(), [(0.1, 1.0), (0.4, 2.0), (0.9, 3.0)])

    def test_lower_bound(self):
        self.assertEqual(self.table.lower_bound(0.05), BELOW_RANGE)
        self.assertEqual(self.table.lower_bound(0.1), 0)
        self.assertEqual(self.table.lower_bound(0.3), 0)
        self.assertEqual(self.table.lower_bound(0.4), 1)
        self.assertEqual(self.table.lower_bound(0.9), 2)
        self.assertEqual(self.table.lower_bound(1.0), 2)

    def test_non_increasing_rejected(self):
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.1, 1.0), (0.05, 2.0), (0.3, 3.0)])

    def test_duplicate_x_rejected(self):
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.1, 1.0), (0.1, 2.0)])

    def test_too_few_points_rejected(self):
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.5, 1.0)])
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([])

    def test_out_of_unit_interval_rejected(self):
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(-0.1, 1.0), (0.5, 2.0)])
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.5, 1.0), (1.2, 2.0)])

    def test_bad_entries_rejected(self):
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.0, 1.0), (1.0, float("nan"))])
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.0, 1.0), (1.0, "abc")])
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.0, 1.0, 2.0), (1.0, 2.0, 3.0)])
        with self.assertRaises(InvalidTableError):
            Table(np.array([0.0, 0.5, 1.0]), np.array([1.0, 2.0]))

    def test_non_iterable_point_rejected(self):
        with self.assertRaisesRegex(InvalidTableError, "Point 0"):
            Table.from_pairs([0.1, 0.2, 0.3])
        with self.assertRaises(InvalidTableError):
            Table.from_pairs([(0.0, 1.0), None])

    def test_immutable(self):
        with self.assertRaises(ValueError):
            self.table.x[0] = 0.2
        with self.assertRaises(AttributeError):
            self.table.y = np.array([0.0, 0.0, 0.0])

    def test_input_arrays_copied(self):
        x = np.array([0.0, 1.0])
        table = Table(x, np.array([1.0, 2.0]))
        x[0] = 0.5
        self.assertEqual(table.x_min, 0.0)

if __name__ == '__main__':
    unittest.main()
