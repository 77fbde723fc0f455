"""
Analytics Series Generator

Builds the multi-equipment comparison series used by the analytics page.
Every requested piece of equipment contributes the same eight metrics to
each record, namespaced by its field prefix (e.g. chiller_1_tonnage).
"""

from datetime import datetime
from typing import Any, Dict, List, Sequence

from core.sampling import RangeSampler
from core.timeseries import (
    MetricSpec,
    StepUnit,
    build_time_axis,
    format_timestamp,
    sample_metrics,
)

ANALYTICS_POINTS = 22
INTERVAL_HOURS = 2

STATUS_VALUES = ("ON", "OFF")

# Numeric metrics per equipment; `status` is added separately
ANALYTICS_METRICS = (
    MetricSpec("supply_temp", 6.0, 8.0, 2),       # °C
    MetricSpec("return_temp", 11.0, 14.0, 2),     # °C
    MetricSpec("efficiency", 0.40, 0.70, 2),      # kW/ton
    MetricSpec("tonnage", 200, 600, 0),           # RT
    MetricSpec("vfd_speed", 30, 100, 0),          # %
    MetricSpec("load", 20, 100, 0),               # %
    MetricSpec("flow", 800, 1600, 0),             # GPM
)


def equipment_readings(prefix: str, sampler: RangeSampler) -> Dict[str, Any]:
    """Sample one reading for a single equipment, keys namespaced by prefix."""
    values = sample_metrics(ANALYTICS_METRICS, sampler)
    values["status"] = sampler.choice(STATUS_VALUES)
    return {f"{prefix}_{name}": value for name, value in values.items()}


def generate_analytics_data(
    prefixes: Sequence[str],
    day: datetime,
    sampler: RangeSampler
) -> List[Dict[str, Any]]:
    """
    Generate the analytics series for a set of equipment.

    Args:
        prefixes: Field prefixes from the parsed equipment list
        day: Requested date; the series starts at its midnight
        sampler: Random source

    Returns:
        22 records at 2-hour intervals, each with a shared `date` field
    """
    start = day.replace(hour=0, minute=0, second=0, microsecond=0)
    records = []

    for ts in build_time_axis(start, StepUnit.HOURS, INTERVAL_HOURS, ANALYTICS_POINTS):
        record: Dict[str, Any] = {"date": format_timestamp(ts, StepUnit.HOURS)}
        for prefix in prefixes:
            record.update(equipment_readings(prefix, sampler))
        records.append(record)

    return records
