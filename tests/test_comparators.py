import math
import unittest
import sys
import os
from functools import cmp_to_key

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lazysort.comparators import (
    key_cmp,
    partial_cmp,
    partial_cmp_first,
    partial_cmp_last,
    reversed_cmp,
    total_cmp,
)

NAN = float("nan")


class TestTotalCmp(unittest.TestCase):
    def test_three_way(self):
        self.assertEqual(total_cmp(1, 2), -1)
        self.assertEqual(total_cmp(2, 1), 1)
        self.assertEqual(total_cmp(2, 2), 0)

    def test_tuples(self):
        self.assertEqual(total_cmp((0, 1), (0, 2)), -1)
        self.assertEqual(total_cmp((1, 0), (0, 9)), 1)


class TestPartialCmp(unittest.TestCase):
    def test_orderable_values(self):
        for by in (partial_cmp_first, partial_cmp_last):
            self.assertEqual(by(1.0, 2.0), -1)
            self.assertEqual(by(2.0, 1.0), 1)
            self.assertEqual(by(1.5, 1.5), 0)

    def test_nan_first_both_argument_orders(self):
        self.assertEqual(partial_cmp_first(NAN, 1.0), -1)
        self.assertEqual(partial_cmp_first(1.0, NAN), 1)
        self.assertEqual(partial_cmp_first(NAN, NAN), 0)

    def test_nan_last_both_argument_orders(self):
        self.assertEqual(partial_cmp_last(NAN, 1.0), 1)
        self.assertEqual(partial_cmp_last(1.0, NAN), -1)
        self.assertEqual(partial_cmp_last(NAN, NAN), 0)

    def test_selector(self):
        self.assertIs(partial_cmp(True), partial_cmp_first)
        self.assertIs(partial_cmp(False), partial_cmp_last)

    def test_public_helpers_documented(self):
        for fn in (total_cmp, partial_cmp, partial_cmp_first, partial_cmp_last,
                   key_cmp, reversed_cmp):
            self.assertTrue(fn.__doc__, fn.__name__)

    def test_usable_with_cmp_to_key(self):
        result = sorted([2.0, NAN, 1.0], key=cmp_to_key(partial_cmp_last))
        self.assertEqual(result[:2], [1.0, 2.0])
        self.assertTrue(math.isnan(result[2]))

    def test_incomparable_sets(self):
        """Disjoint sets have no order; the policy answers by argument position."""
        self.assertEqual(partial_cmp_first({1}, {2}), -1)
        self.assertEqual(partial_cmp_first({2}, {1}), -1)
        self.assertEqual(partial_cmp_last({1}, {2}), 1)
        self.assertEqual(partial_cmp_first({1}, {1, 2}), -1)
        self.assertEqual(partial_cmp_first({1}, {1}), 0)


class TestDerivedCmp(unittest.TestCase):
    def test_key_cmp(self):
        by_len = key_cmp(len)
        self.assertEqual(by_len("abc", "z"), 1)
        self.assertEqual(by_len("ab", "yz"), 0)

    def test_key_cmp_with_inner_comparator(self):
        by_score = key_cmp(lambda pair: pair[1], partial_cmp_last)
        self.assertEqual(by_score(("a", NAN), ("b", 3.0)), 1)

    def test_reversed_cmp(self):
        desc = reversed_cmp(total_cmp)
        self.assertEqual(desc(1, 2), 1)
        self.assertEqual(desc(2, 1), -1)
        self.assertEqual(desc(3, 3), 0)


if __name__ == "__main__":
    unittest.main()
