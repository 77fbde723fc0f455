"""
Time-Series Synthesis

Turns a base timestamp plus a step into an ordered time axis, and attaches
independently sampled metrics to each point. Every generated endpoint
(efficiency, analytics, tonnage, report dashboard) is an instantiation of
generate_series with its own metric table.

Label formats:
- Intraday steps (minutes, hours): "MM-DD-YYYY HH:mm"
- Daily steps: "Mon DD"   (e.g. "Oct 07")
- Monthly steps: "Mon YYYY" (e.g. "Jan 2026")
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Sequence

import pandas as pd

from .sampling import RangeSampler


class StepUnit(Enum):
    """Granularity of one step along the time axis."""
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    MONTHS = "months"


INTRADAY_FORMAT = "%m-%d-%Y %H:%M"
DAILY_FORMAT = "%b %d"
MONTHLY_FORMAT = "%b %Y"


@dataclass(frozen=True)
class MetricSpec:
    """
    A single randomized field of a synthetic record.

    Attributes:
        name: Key in the generated record
        lo: Lower bound (inclusive)
        hi: Upper bound (inclusive)
        decimals: Rounding precision (0 yields integers)
    """
    name: str
    lo: float
    hi: float
    decimals: int = 2

    def draw(self, sampler: RangeSampler):
        return sampler.sample(self.lo, self.hi, self.decimals)


def _offset(unit: StepUnit, size: int) -> pd.offsets.BaseOffset:
    if unit == StepUnit.MINUTES:
        return pd.offsets.Minute(size)
    if unit == StepUnit.HOURS:
        return pd.offsets.Hour(size)
    if unit == StepUnit.DAYS:
        return pd.offsets.Day(size)
    # Calendar months, not a fixed number of days
    return pd.DateOffset(months=size)


def build_time_axis(
    base: datetime,
    unit: StepUnit,
    size: int,
    count: int
) -> List[datetime]:
    """
    Build an ascending time axis.

    Entry i is base + i * (size units). Month steps use calendar
    arithmetic, so a base on the 1st stays on the 1st.

    Args:
        base: First timestamp
        unit: Step unit
        size: Number of units per step (>= 1)
        count: Number of entries (>= 0)

    Returns:
        List of datetimes of length count

    Raises:
        ValueError: If size < 1 or count < 0
    """
    if size < 1:
        raise ValueError(f"Step size must be >= 1, got {size}")
    if count < 0:
        raise ValueError(f"Count must be >= 0, got {count}")
    if count == 0:
        return []

    index = pd.date_range(start=base, periods=count, freq=_offset(unit, size))
    return [ts.to_pydatetime() for ts in index]


def format_timestamp(ts: datetime, unit: StepUnit) -> str:
    """Render a timestamp label appropriate for the step unit."""
    if unit in (StepUnit.MINUTES, StepUnit.HOURS):
        return ts.strftime(INTRADAY_FORMAT)
    if unit == StepUnit.DAYS:
        return ts.strftime(DAILY_FORMAT)
    return ts.strftime(MONTHLY_FORMAT)


def sample_metrics(
    metrics: Sequence[MetricSpec],
    sampler: RangeSampler
) -> Dict[str, Any]:
    """Draw one value per metric, in table order."""
    return {metric.name: metric.draw(sampler) for metric in metrics}


def generate_series(
    base: datetime,
    unit: StepUnit,
    size: int,
    count: int,
    metrics: Sequence[MetricSpec],
    sampler: RangeSampler
) -> List[Dict[str, Any]]:
    """
    Generate an ordered series of synthetic records.

    Args:
        base: Timestamp of the first record
        unit: Step unit
        size: Units per step
        count: Number of records
        metrics: Fields to sample for each record
        sampler: Random source

    Returns:
        Records shaped {"date": <label>, <metric>: <value>, ...}
    """
    records = []
    for ts in build_time_axis(base, unit, size, count):
        record: Dict[str, Any] = {"date": format_timestamp(ts, unit)}
        record.update(sample_metrics(metrics, sampler))
        records.append(record)
    return records
