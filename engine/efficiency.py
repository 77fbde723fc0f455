"""
Efficiency Curve Generator

Produces the intraday actual-vs-target efficiency curves shown on the
plant efficiency page. One curve pair per unit, three units per
equipment type, 70 readings at 15-minute intervals starting at midnight.

Efficiency is expressed in kW/ton, so lower is better; targets sit
slightly above the actual band.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Tuple

from core.sampling import RangeSampler
from core.timeseries import MetricSpec, StepUnit, generate_series


class EquipmentType(str, Enum):
    """Equipment families with an efficiency curve."""
    CHILLER = "chiller"
    CW_PUMP = "cwPump"
    CHW_PUMP = "chwPump"


READINGS_PER_DAY = 70
INTERVAL_MINUTES = 15
UNITS_PER_TYPE = 3

# (field prefix, actual range, target range)
EFFICIENCY_BANDS: Dict[EquipmentType, Tuple[str, Tuple[float, float], Tuple[float, float]]] = {
    EquipmentType.CHILLER: ("chiller", (0.40, 0.60), (0.42, 0.62)),
    EquipmentType.CW_PUMP: ("cw_pump", (0.05, 0.09), (0.06, 0.10)),
    EquipmentType.CHW_PUMP: ("chw_pump", (0.04, 0.08), (0.05, 0.09)),
}


def efficiency_metrics(equipment_type: EquipmentType) -> List[MetricSpec]:
    """
    Build the metric table for an equipment type.

    Yields all actual fields first, then all target fields, e.g.
    chiller_1_actual_efficiency ... chiller_3_target_efficiency.
    """
    prefix, actual, target = EFFICIENCY_BANDS[equipment_type]
    units = range(1, UNITS_PER_TYPE + 1)

    metrics = [
        MetricSpec(f"{prefix}_{n}_actual_efficiency", actual[0], actual[1], 2)
        for n in units
    ]
    metrics.extend(
        MetricSpec(f"{prefix}_{n}_target_efficiency", target[0], target[1], 2)
        for n in units
    )
    return metrics


def generate_efficiency_rows(
    equipment_type: EquipmentType,
    day: datetime,
    sampler: RangeSampler
) -> List[Dict[str, Any]]:
    """
    Generate one day of efficiency readings.

    Args:
        equipment_type: Which equipment family to simulate
        day: Requested date; the series starts at its midnight
        sampler: Random source

    Returns:
        70 records ordered by time
    """
    start = day.replace(hour=0, minute=0, second=0, microsecond=0)
    return generate_series(
        base=start,
        unit=StepUnit.MINUTES,
        size=INTERVAL_MINUTES,
        count=READINGS_PER_DAY,
        metrics=efficiency_metrics(equipment_type),
        sampler=sampler,
    )
