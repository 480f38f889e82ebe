"""DailyRecord Schema"""

import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class DailyRecord:
    """
    Represents one row of the temperature source file.

    Attributes:
        date (datetime.date): The calendar date of the reading.
        max_temperature (float): Maximum temperature of the day, NaN if the
            source value could not be read as a number.
        min_temperature (float): Minimum temperature of the day, NaN if the
            source value could not be read as a number.
    """

    date: datetime.date
    max_temperature: float
    min_temperature: float

    @property
    def day(self) -> int:
        """Day of the month, used as the sparkline x coordinate."""
        return self.date.day
