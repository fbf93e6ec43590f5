"""Unit tests for the timing plot script"""

import os
from pathlib import Path
import tempfile
import unittest

import matplotlib

matplotlib.use("Agg")

from patternbook.scripts.figures.plot_operation_cost import (  # noqa: E402
    drop_outliers,
    load_timings,
    plot,
)

TIMINGS = """Structure\tSize\tTrial\tSeconds per operation
array_queue\t10\t0\t1e-06
array_queue\t10\t1\t1.1e-06
array_queue\t10\t2\t1.2e-06
array_queue\t10\t3\t1.1e-06
array_queue\t10\t4\t9e-04
linked_queue\t10\t0\t2e-06
linked_queue\t10\t1\t2e-06
"""


class TestPlotOperationCost(unittest.TestCase):
    def setUp(self) -> None:
        self.directory = tempfile.TemporaryDirectory()
        self.path = Path(self.directory.name) / "timings.tsv"
        self.path.write_text(TIMINGS, encoding="utf-8")

    def tearDown(self) -> None:
        self.directory.cleanup()

    def test_drop_outliers(self) -> None:
        df = load_timings(self.path)
        self.assertEqual(list(df.columns), ["structure", "size", "trial", "seconds"])
        kept = drop_outliers(df)
        self.assertEqual(len(kept), 6)
        self.assertNotIn(4, list(kept[kept.structure == "array_queue"].trial))

    def test_plot(self) -> None:
        output = Path(self.directory.name) / "timings.png"
        plot(drop_outliers(load_timings(self.path)), output)
        self.assertTrue(os.path.exists(output))


if __name__ == "__main__":
    unittest.main()
