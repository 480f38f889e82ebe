"""
Module containing the schema definitions for the heatmap package.
"""

from .daily_record import DailyRecord
from .month_bucket import MonthBucket
from .heatmap_state import HeatmapState, VIEW_MODES

__all__ = [
    "DailyRecord",
    "MonthBucket",
    "HeatmapState",
    "VIEW_MODES",
]
