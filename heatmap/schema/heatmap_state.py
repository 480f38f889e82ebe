"""HeatmapState Schema"""

import dataclasses
from dataclasses import dataclass
from typing import Optional, Tuple

from .month_bucket import MonthBucket

VIEW_MODES = ("max", "min")


@dataclass(frozen=True)
class HeatmapState:
    """
    Snapshot handed to the rendering layer. A new snapshot is produced on
    every load or view change; existing snapshots are never modified.

    Attributes:
        years (tuple): Every year of the matrix, ascending.
        monthly (tuple): MonthBucket instances, year-major and month-minor,
            exactly twelve per year.
        view_mode (str): Statistic used to color cells, "max" or "min".
    """

    years: Tuple[int, ...]
    monthly: Tuple[MonthBucket, ...]
    view_mode: str = "max"

    def __post_init__(self):
        if self.view_mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {VIEW_MODES}, got {self.view_mode!r}")
        if len(self.monthly) != len(self.years) * 12:
            raise ValueError(
                f"Expected {len(self.years) * 12} buckets for {len(self.years)} years, "
                f"got {len(self.monthly)}"
            )

    def toggled(self) -> "HeatmapState":
        """Return a copy of the snapshot showing the other statistic."""
        return dataclasses.replace(
            self, view_mode="min" if self.view_mode == "max" else "max"
        )

    def bucket_at(self, year: int, month: int) -> MonthBucket:
        """
        Look up a bucket by its position in the grid.

        Raises:
            KeyError: If the year or month is outside the grid.
        """
        if not self.years or not self.years[0] <= year <= self.years[-1]:
            raise KeyError((year, month))
        if not 1 <= month <= 12:
            raise KeyError((year, month))
        return self.monthly[(year - self.years[0]) * 12 + (month - 1)]

    def cell_value(self, bucket: MonthBucket) -> Optional[float]:
        """Value of the selected statistic for a bucket."""
        match self.view_mode:
            case "max":
                return bucket.month_max
            case "min":
                return bucket.month_min
