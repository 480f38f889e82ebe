"""
Aggregation of the daily readings of a single month into a MonthBucket.
"""

import logging

import pandas as pd

from heatmap.schema import DailyRecord, MonthBucket
from .base_builder import BaseBuilder


class MonthBuilder(BaseBuilder):
    """
    Summarizes the daily readings of one year and month.
    """

    def __init__(self, records: pd.DataFrame, year: int, month: int):
        """
        Initialize the MonthBuilder.

        Args:
            records (pd.DataFrame): Daily readings, all within the month.
            year (int): Year of the month.
            month (int): Month number (1-12).
        """
        super().__init__(records=records)
        self.year = year
        self.month = month

    def run(self) -> MonthBucket:
        """
        Build the MonthBucket for the month.

        Returns:
            MonthBucket: The aggregated bucket, or an empty placeholder
            bucket if there are no records.
        """
        if len(self.records) == 0:
            return MonthBucket.empty(self.year, self.month)

        days = self.sorted_days()
        mean_max, mean_min, month_max, month_min = self.calculate_temperature(days)

        return MonthBucket(
            year=self.year,
            month=self.month,
            days=tuple(
                DailyRecord(
                    date=row.date.date(),
                    max_temperature=float(row.max_temperature),
                    min_temperature=float(row.min_temperature),
                )
                for row in days.itertuples(index=False)
            ),
            has_data=True,
            mean_max=mean_max,
            mean_min=mean_min,
            month_max=month_max,
            month_min=month_min,
        )

    def sorted_days(self) -> pd.DataFrame:
        """
        Order the readings by date, keeping the first reading of any
        repeated date.

        Returns:
            pd.DataFrame: One row per date, ascending.
        """
        unique = self.records.drop_duplicates(subset=["date"], keep="first")
        dropped = len(self.records) - len(unique)
        if dropped:
            logging.warning(
                "Dropped %d duplicated dates in %d-%02d", dropped, self.year, self.month
            )
        return unique.sort_values("date", kind="stable")

    @staticmethod
    def calculate_temperature(days: pd.DataFrame) -> tuple:
        """
        Calculate temperature statistics for the month. Missing values are
        ignored; a statistic without any value is None.

        Args:
            days (pd.DataFrame): Daily readings of the month.

        Returns:
            tuple: (mean_max, mean_min, month_max, month_min)
        """
        df_max = days["max_temperature"].dropna()
        df_min = days["min_temperature"].dropna()

        mean_max = float(df_max.mean()) if not df_max.empty else None
        mean_min = float(df_min.mean()) if not df_min.empty else None
        month_max = float(df_max.max()) if not df_max.empty else None
        month_min = float(df_min.min()) if not df_min.empty else None

        return mean_max, mean_min, month_max, month_min
