"""This module stores the model for the heatmap package."""

from .heatmap import Heatmap, FAILURE_MESSAGE
from .loader import DataSourceError

__all__ = [
    "builders",
    "loader",
    "logger",
    "scales",
    "schema",
    "Heatmap",
    "DataSourceError",
    "FAILURE_MESSAGE",
]
