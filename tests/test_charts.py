import tempfile
import unittest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import generate_charts
from benchmark_lazysort import run_benchmark


class TestCharts(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.results = run_benchmark([100, 400], [1, 10, 100], trials=1, seed=3)

    def test_group_by_size(self):
        grouped = generate_charts.group_by_size(self.results)
        self.assertEqual(list(grouped.keys()), [100, 400])
        self.assertEqual([k for k, _ in grouped[100]], [1, 10, 100])
        self.assertTrue(all(len(rows) == 1 for _, rows in grouped[400]))

    def test_charts_written(self):
        grouped = generate_charts.group_by_size(self.results)
        generate_charts.setup_style()
        with tempfile.TemporaryDirectory() as tmp:
            generate_charts.chart_1_timing(grouped, tmp)
            generate_charts.chart_2_comparisons(grouped, tmp)
            self.assertEqual(sorted(os.listdir(tmp)), ["1_timing.png", "2_comparisons.png"])


if __name__ == "__main__":
    unittest.main()
