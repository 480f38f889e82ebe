"""
Builders module.
"""

from .base_builder import BaseBuilder
from .month_builder import MonthBuilder
from .grid_builder import GridBuilder

__all__ = [
    "BaseBuilder",
    "MonthBuilder",
    "GridBuilder",
]
