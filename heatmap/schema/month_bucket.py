"""MonthBucket Schema"""

import datetime
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .daily_record import DailyRecord


@dataclass(frozen=True)
class MonthBucket:
    """
    Represents one cell of the calendar matrix: the aggregation of every
    DailyRecord that falls in a given year and month.

    Attributes:
        year (int): Calendar year of the bucket.
        month (int): Calendar month of the bucket (1-12).
        days (tuple): DailyRecord instances sorted ascending by date.
        has_data (bool): False for months without any source row.
        mean_max (float): Average of the daily maximum temperatures.
        mean_min (float): Average of the daily minimum temperatures.
        month_max (float): Highest daily maximum temperature of the month.
        month_min (float): Lowest daily minimum temperature of the month.
    """

    year: int
    month: int
    days: Tuple[DailyRecord, ...] = field(default_factory=tuple)
    has_data: bool = False
    mean_max: Optional[float] = None
    mean_min: Optional[float] = None
    month_max: Optional[float] = None
    month_min: Optional[float] = None

    @classmethod
    def empty(cls, year: int, month: int) -> "MonthBucket":
        """Placeholder bucket for a month without data."""
        return cls(year=year, month=month)

    @property
    def label(self) -> str:
        """Year and month as YYYY-MM."""
        return f"{self.year}-{self.month:02d}"

    @property
    def start_date(self) -> Optional[datetime.date]:
        return self.days[0].date if self.days else None

    @property
    def end_date(self) -> Optional[datetime.date]:
        return self.days[-1].date if self.days else None
