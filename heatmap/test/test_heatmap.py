"""
Test cases for the heatmap.py classes and functions.
"""

import datetime
import json
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from heatmap import FAILURE_MESSAGE, Heatmap
from heatmap.schema import DailyRecord, MonthBucket

CSV = (
    "date,max_temperature,min_temperature\n"
    "2010-01-02,7.0,0.0\n"
    "2010-01-01,5.0,-1.0\n"
    "2011-06-10,25.0,\n"
    "2015-03-01,10.0,2.0\n"
)


class TestHeatmap(unittest.TestCase):
    """Test cases for the Heatmap class."""

    def setUp(self):
        """Write a small source file."""
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "temperature_daily.csv")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(CSV)

        self.logger_patcher = patch("heatmap.heatmap.config_logger")
        self.mock_config_logger = self.logger_patcher.start()

    def tearDown(self):
        """Clean up the source file and patchers."""
        self.logger_patcher.stop()
        self.tmp.cleanup()

    def test_initialization(self):
        """The logger is configured and invalid settings are rejected."""
        Heatmap(data_path=self.path, debug=True)
        self.mock_config_logger.assert_called_once_with(debug=True)

        with self.assertRaises(ValueError):
            Heatmap(data_path=self.path, start_year=2012, end_year=2010)
        with self.assertRaises(ValueError):
            Heatmap(data_path=self.path, view_mode="mean")

    def test_run(self):
        """A complete snapshot is built for the configured years."""
        state = Heatmap(data_path=self.path, start_year=2010, end_year=2011).run()

        self.assertEqual(state.years, (2010, 2011))
        self.assertEqual(len(state.monthly), 24)
        self.assertEqual(state.view_mode, "max")

        january = state.bucket_at(2010, 1)
        self.assertAlmostEqual(january.mean_max, 6.0)
        self.assertAlmostEqual(january.mean_min, -0.5)
        self.assertEqual(january.month_max, 7.0)
        self.assertEqual(january.month_min, -1.0)

        june = state.bucket_at(2011, 6)
        self.assertEqual(june.month_max, 25.0)
        self.assertIsNone(june.month_min)

        self.assertEqual(sum(bucket.has_data for bucket in state.monthly), 2)

    def test_run_default_range(self):
        """The default matrix covers 2008 to 2017."""
        state = Heatmap(data_path=self.path).run()

        self.assertEqual(state.years, tuple(range(2008, 2018)))
        self.assertEqual(len(state.monthly), 120)
        self.assertTrue(state.bucket_at(2015, 3).has_data)

    def test_run_idempotent(self):
        """Building twice from the same file gives the same snapshot."""
        heatmap = Heatmap(data_path=self.path, start_year=2010, end_year=2011)
        # compared as dicts since NaN readings never compare equal
        self.assertEqual(Heatmap.to_dict(heatmap.run()), Heatmap.to_dict(heatmap.run()))

    @patch("heatmap.heatmap.logging.error")
    def test_run_failure(self, mock_error):
        """A missing source logs the generic failure message and returns None."""
        heatmap = Heatmap(data_path=os.path.join(self.tmp.name, "missing.csv"))

        self.assertIsNone(heatmap.run())
        mock_error.assert_called_once_with(FAILURE_MESSAGE)

    def test_describe(self):
        """Tooltips show the month and the extremes, or the lack of data."""
        bucket = MonthBucket(
            year=2010,
            month=1,
            days=(DailyRecord(datetime.date(2010, 1, 1), 5.0, -1.0),),
            has_data=True,
            month_max=7.04,
            month_min=-1.0,
        )

        self.assertEqual(Heatmap.describe(bucket), "Date: 2010-01, max: 7.0 min: -1.0")
        self.assertEqual(
            Heatmap.describe(MonthBucket.empty(2010, 2)), "Date: 2010-02\nNo data available"
        )

    def test_export(self):
        """The snapshot is written as JSON with NaN turned into null."""
        state = Heatmap(data_path=self.path, start_year=2011, end_year=2011).run()
        out = os.path.join(self.tmp.name, "grid.json")
        Heatmap.export(state, out)

        with open(out, encoding="utf-8") as f:
            data = json.load(f)

        self.assertEqual(data["years"], [2011])
        self.assertEqual(data["view_mode"], "max")
        self.assertEqual(len(data["monthly"]), 12)

        june = data["monthly"][5]
        self.assertTrue(june["has_data"])
        self.assertIsNone(june["month_min"])
        self.assertEqual(
            june["days"], [{"date": "2011-06-10", "day": 10, "max": 25.0, "min": None}]
        )
        self.assertEqual(data["monthly"][0]["days"], [])

    def test_export_infinite_reading(self):
        """Overflowing readings are exported as null and the file is strict JSON."""
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("date,max_temperature,min_temperature\n2010-01-01,1e999,-1\n")

        state = Heatmap(data_path=self.path, start_year=2010, end_year=2010).run()
        out = os.path.join(self.tmp.name, "grid.json")
        Heatmap.export(state, out)

        with open(out, encoding="utf-8") as f:
            text = f.read()

        def reject(token):
            raise ValueError(f"non-finite token {token}")

        data = json.loads(text, parse_constant=reject)
        january = data["monthly"][0]
        self.assertNotIn("Infinity", text)
        self.assertIsNone(january["month_max"])
        self.assertIsNone(january["mean_max"])
        self.assertEqual(january["month_min"], -1.0)
        self.assertIsNone(january["days"][0]["max"])


if __name__ == "__main__":
    logging.disable(logging.CRITICAL)
    unittest.main()
