"""
Numeric scales shared with the rendering layer: range padding for
sparklines, linear projection and the stepped color palette.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from heatmap.schema import HeatmapState, MonthBucket

# 0 C at the first color, 40 C at the last
PALETTE = (
    "#6b66b8",
    "#4f8fcd",
    "#5fbec0",
    "#8ed08e",
    "#d4e392",
    "#f2efba",
    "#efc66e",
    "#f2a556",
    "#ef6b47",
    "#d93d58",
    "#b1005f",
)
NO_DATA_COLOR = "#d4d7ce"
COLOR_DOMAIN = (0.0, 40.0)
DAY_DOMAIN = (1, 31)


def padded_domain(low: float, high: float, epsilon: float = 1.0) -> Tuple[float, float]:
    """
    Widen a zero-width domain by epsilon on each side.

    Args:
        low (float): Lower bound.
        high (float): Upper bound.
        epsilon (float, optional): Padding applied when low equals high.
            Defaults to 1.0.

    Returns:
        tuple: (low, high), widened if they were equal.
    """
    if low == high:
        return low - epsilon, high + epsilon
    return low, high


def sparkline_domain(bucket: MonthBucket) -> Tuple[float, float]:
    """
    Temperature domain of a bucket's sparkline: the span of every finite
    daily reading, minimum and maximum alike.

    Raises:
        ValueError: If the bucket has no finite reading at all.
    """
    if not bucket.has_data:
        raise ValueError(f"Bucket {bucket.label} has no data")

    readings = np.array(
        [day.min_temperature for day in bucket.days]
        + [day.max_temperature for day in bucket.days],
        dtype="float64",
    )
    finite = readings[np.isfinite(readings)]
    if finite.size == 0:
        raise ValueError(f"Bucket {bucket.label} has no numeric readings")
    return padded_domain(float(finite.min()), float(finite.max()))


@dataclass(frozen=True)
class LinearScale:
    """Maps a continuous domain linearly onto an output range."""

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __post_init__(self):
        if self.domain[0] == self.domain[1]:
            raise ValueError(f"Domain {self.domain} has zero width")

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)


@dataclass(frozen=True)
class QuantizeScale:
    """
    Splits a continuous domain into equal steps, one per output color.
    Values outside the domain take the first or last color.
    """

    domain: Tuple[float, float] = COLOR_DOMAIN
    range: Sequence[str] = PALETTE

    def __call__(self, value: Optional[float]) -> Optional[str]:
        if value is None or math.isnan(value):
            return None

        d0, d1 = self.domain
        steps = len(self.range)
        position = np.floor((value - d0) / (d1 - d0) * steps)
        return self.range[int(np.clip(position, 0, steps - 1))]


def cell_color(state: HeatmapState, bucket: MonthBucket, scale: QuantizeScale = QuantizeScale()) -> str:
    """Fill color of a cell for the state's current view."""
    if not bucket.has_data:
        return NO_DATA_COLOR
    return scale(state.cell_value(bucket)) or NO_DATA_COLOR


def sparkline_points(
    bucket: MonthBucket, width: float, height: float, padding: float = 2
) -> Tuple[List[Tuple[float, float]], List[Tuple[float, float]]]:
    """
    Project a bucket's daily readings into cell coordinates. Screen y grows
    downwards, so higher temperatures get smaller y values.

    Args:
        bucket (MonthBucket): Bucket with data.
        width (float): Cell width.
        height (float): Cell height.
        padding (float, optional): Inner margin of the cell. Defaults to 2.

    Returns:
        tuple: (max_points, min_points), each a list of (x, y) pairs in day
        order. Days with a missing or infinite temperature are left out of
        their line.
    """
    sx = LinearScale(domain=DAY_DOMAIN, range=(padding, width - padding))
    sy = LinearScale(domain=sparkline_domain(bucket), range=(height - padding, padding))

    max_points = [
        (sx(day.day), sy(day.max_temperature))
        for day in bucket.days
        if math.isfinite(day.max_temperature)
    ]
    min_points = [
        (sx(day.day), sy(day.min_temperature))
        for day in bucket.days
        if math.isfinite(day.min_temperature)
    ]
    return max_points, min_points
