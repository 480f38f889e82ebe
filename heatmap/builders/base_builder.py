"""
Base class for all builders.
"""

from abc import ABC, abstractmethod

import pandas as pd


class BaseBuilder(ABC):
    """
    Abstract base class for all builders.
    """

    def __init__(self, records: pd.DataFrame):
        """
        Initialize the builder with the daily readings it works on.

        Args:
            records (pd.DataFrame): Daily readings with date, max_temperature
                and min_temperature columns.
        """
        self.records = records

    @abstractmethod
    def run(self):
        """
        Aggregate the records and return the result.
        """
