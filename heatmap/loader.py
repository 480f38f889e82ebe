"""
Reading of the daily temperature source file into typed records.
"""

import logging
from typing import List, Mapping

import pandas as pd

from heatmap.schema import DailyRecord

DATE_FORMAT = "%Y-%m-%d"
COLUMNS = ["date", "max_temperature", "min_temperature"]


class DataSourceError(RuntimeError):
    """The temperature source is unavailable or malformed."""


def parse_row(row: Mapping[str, str]) -> DailyRecord:
    """
    Convert one raw source row into a DailyRecord.

    Uses the same coercion as Loader.parse: temperatures that cannot be
    read as numbers become NaN.

    Args:
        row (Mapping[str, str]): Row with date, max_temperature and
            min_temperature keys.

    Returns:
        DailyRecord: The typed record.

    Raises:
        DataSourceError: If the date is missing or not a YYYY-MM-DD date.
    """
    raw = pd.DataFrame({column: [row.get(column)] for column in COLUMNS})
    return Loader.to_records(Loader.parse(raw))[0]


class Loader:
    """Loads the temperature CSV file into a DataFrame of daily readings."""

    @classmethod
    def read(cls, path: str) -> pd.DataFrame:
        """
        Read and type the source file.

        Args:
            path (str): Path of the CSV file.

        Returns:
            pd.DataFrame: Columns date (datetime64), max_temperature and
            min_temperature (float64), in file order.

        Raises:
            DataSourceError: If the file cannot be read, is empty, lacks a
                required column or contains an unparseable date.
        """
        logging.info("Reading temperature records from %s", path)
        try:
            raw = pd.read_csv(path, dtype=str)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise DataSourceError(f"Could not read {path}: {e}") from e

        missing = [column for column in COLUMNS if column not in raw.columns]
        if missing:
            raise DataSourceError(f"{path} is missing columns: {', '.join(missing)}")

        if raw.empty:
            raise DataSourceError(f"{path} contains no records")

        return cls.parse(raw)

    @staticmethod
    def parse(raw: pd.DataFrame) -> pd.DataFrame:
        """
        Type the raw string columns of the source file.

        Args:
            raw (pd.DataFrame): Source rows as strings.

        Returns:
            pd.DataFrame: Typed daily readings.

        Raises:
            DataSourceError: If any date is not a YYYY-MM-DD date.
        """
        dates = pd.to_datetime(raw["date"], format=DATE_FORMAT, errors="coerce")
        bad_dates = raw.loc[dates.isna(), "date"]
        if not bad_dates.empty:
            raise DataSourceError(
                f"{len(bad_dates)} rows have an invalid date (first: {bad_dates.iloc[0]!r})"
            )

        frame = pd.DataFrame(
            {
                "date": dates,
                "max_temperature": pd.to_numeric(
                    raw["max_temperature"], errors="coerce"
                ).astype("float64"),
                "min_temperature": pd.to_numeric(
                    raw["min_temperature"], errors="coerce"
                ).astype("float64"),
            }
        )

        # bad numbers stay NaN; statistics skip them
        not_numeric = frame[["max_temperature", "min_temperature"]].isna().any(axis=1)
        if not_numeric.any():
            logging.warning(
                "%d rows have a missing or non-numeric temperature", int(not_numeric.sum())
            )

        logging.debug("Parsed %d daily records", len(frame))
        return frame

    @staticmethod
    def to_records(frame: pd.DataFrame) -> List[DailyRecord]:
        """Convert a typed DataFrame into DailyRecord instances."""
        return [
            DailyRecord(
                date=row.date.date(),
                max_temperature=float(row.max_temperature),
                min_temperature=float(row.min_temperature),
            )
            for row in frame.itertuples(index=False)
        ]
