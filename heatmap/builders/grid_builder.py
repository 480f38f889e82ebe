"""
Builds the dense year x month grid of MonthBucket instances.
"""

import logging
from typing import Dict, Iterable, List, Tuple, Union

import pandas as pd

from heatmap.schema import DailyRecord, MonthBucket
from .base_builder import BaseBuilder
from .month_builder import MonthBuilder

MONTHS = range(1, 13)


class GridBuilder(BaseBuilder):
    """
    Groups daily readings by year and month and lays the resulting buckets
    out year-major, month-minor, with a placeholder for every month that has
    no readings.
    """

    def __init__(
        self,
        records: Union[pd.DataFrame, Iterable[DailyRecord]],
        start_year: int,
        end_year: int,
    ):
        """
        Initialize the GridBuilder.

        Args:
            records (pd.DataFrame | Iterable[DailyRecord]): Daily readings in
                any order, as returned by the Loader or as DailyRecord instances.
            start_year (int): First year of the grid (inclusive).
            end_year (int): Last year of the grid (inclusive).

        Raises:
            ValueError: If start_year is after end_year.
        """
        if start_year > end_year:
            raise ValueError(f"start_year {start_year} is after end_year {end_year}")

        super().__init__(records=self._as_frame(records))
        self.start_year = start_year
        self.end_year = end_year

    @staticmethod
    def _as_frame(records) -> pd.DataFrame:
        if isinstance(records, pd.DataFrame):
            return records

        records = list(records)
        return pd.DataFrame(
            {
                "date": pd.to_datetime([record.date for record in records]),
                "max_temperature": pd.Series(
                    [record.max_temperature for record in records], dtype="float64"
                ),
                "min_temperature": pd.Series(
                    [record.min_temperature for record in records], dtype="float64"
                ),
            }
        )

    @property
    def years(self) -> List[int]:
        return list(range(self.start_year, self.end_year + 1))

    def filter_years(self) -> pd.DataFrame:
        """Keep the readings whose year is inside the grid."""
        years = self.records["date"].dt.year
        return self.records[(years >= self.start_year) & (years <= self.end_year)]

    def group_months(self) -> Dict[Tuple[int, int], MonthBucket]:
        """
        Aggregate the filtered readings of every month that has any.

        Returns:
            dict: MonthBucket keyed by (year, month).
        """
        filtered = self.filter_years()
        dates = filtered["date"].dt
        buckets = {}
        keys = [dates.year.rename("year"), dates.month.rename("month")]
        for (year, month), group in filtered.groupby(keys):
            key = (int(year), int(month))
            buckets[key] = MonthBuilder(records=group, year=key[0], month=key[1]).run()
        return buckets

    def run(self) -> List[MonthBucket]:
        """
        Build the dense grid.

        Returns:
            list: len(years) * 12 MonthBucket instances, ordered by year
            then month.
        """
        buckets = self.group_months()
        logging.info(
            "Aggregated %d months with data between %d and %d",
            len(buckets),
            self.start_year,
            self.end_year,
        )

        return [
            buckets.get((year, month)) or MonthBucket.empty(year, month)
            for year in self.years
            for month in MONTHS
        ]
