"""
Heatmap class: loads the temperature source and builds the calendar matrix.
"""

import json
import logging
import math
from typing import Optional

from heatmap.builders import GridBuilder
from heatmap.loader import DataSourceError, Loader
from heatmap.logger import config_logger
from heatmap.schema import HeatmapState, MonthBucket, VIEW_MODES

FAILURE_MESSAGE = "Failed to load or render data. Check the log for details."


class Heatmap:
    """Main class for building the temperature calendar matrix."""

    def __init__(
        self,
        data_path: str,
        start_year: int = 2008,
        end_year: int = 2017,
        view_mode: str = "max",
        debug: bool = False,
    ):
        if start_year > end_year:
            raise ValueError(f"start_year {start_year} is after end_year {end_year}")
        if view_mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {VIEW_MODES}, got {view_mode!r}")

        self.data_path = data_path
        self.start_year = start_year
        self.end_year = end_year
        self.view_mode = view_mode

        config_logger(debug=debug)

    def build(self) -> HeatmapState:
        """
        Load the source and aggregate it into a new snapshot.

        Raises:
            DataSourceError: If the source is unavailable or malformed.
        """
        records = Loader.read(self.data_path)
        builder = GridBuilder(
            records=records, start_year=self.start_year, end_year=self.end_year
        )
        return HeatmapState(
            years=tuple(builder.years),
            monthly=tuple(builder.run()),
            view_mode=self.view_mode,
        )

    def run(self) -> Optional[HeatmapState]:
        """
        Main entry point. Returns None, after logging FAILURE_MESSAGE, when
        the source cannot be used.
        """
        logging.info(
            "Building heatmap for %d-%d from %s",
            self.start_year,
            self.end_year,
            self.data_path,
        )
        try:
            state = self.build()
        except DataSourceError as e:
            logging.debug("Data source error: %s", e)
            logging.error(FAILURE_MESSAGE)
            return None

        logging.info("Heatmap done (%d cells).", len(state.monthly))
        return state

    @staticmethod
    def describe(bucket: MonthBucket) -> str:
        """Tooltip text for a cell."""
        if not bucket.has_data:
            return f"Date: {bucket.label}\nNo data available"
        return (
            f"Date: {bucket.start_date:%Y-%m}, "
            f"max: {_fmt(bucket.month_max)} min: {_fmt(bucket.month_min)}"
        )

    @staticmethod
    def to_dict(state: HeatmapState) -> dict:
        """
        Plain representation of a snapshot, suitable for strict JSON. NaN,
        infinite and missing values are written as None.
        """
        return {
            "years": list(state.years),
            "view_mode": state.view_mode,
            "monthly": [
                {
                    "year": bucket.year,
                    "month": bucket.month,
                    "has_data": bucket.has_data,
                    "mean_max": _clean(bucket.mean_max),
                    "mean_min": _clean(bucket.mean_min),
                    "month_max": _clean(bucket.month_max),
                    "month_min": _clean(bucket.month_min),
                    "days": [
                        {
                            "date": day.date.isoformat(),
                            "day": day.day,
                            "max": _clean(day.max_temperature),
                            "min": _clean(day.min_temperature),
                        }
                        for day in bucket.days
                    ],
                }
                for bucket in state.monthly
            ],
        }

    @classmethod
    def export(cls, state: HeatmapState, path: str) -> None:
        """Write the snapshot as JSON to path."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(cls.to_dict(state), f, indent=2, allow_nan=False)
        logging.info("Exported heatmap to %s", path)


def _clean(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return value


def _fmt(value: Optional[float]) -> str:
    return "n/a" if _clean(value) is None else f"{value:.1f}"
