"""
Energy Summary Generator

Produces the headline cards of the energy management page. The `type`
parameter selects one of two fixed catalogs (consumption or cost); the
shape of the result never changes for a given type, only the values.

Some cards carry a status badge. Its text and color follow from
comparing the drawn value with a threshold: at or below is favourable
(green), above is not (red).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from core.sampling import RangeSampler


class EnergySummaryType(str, Enum):
    """Available summary catalogs."""
    CONSUMPTION = "consumption"
    COST = "cost"


GOOD_COLOR = "green"
BAD_COLOR = "red"


@dataclass(frozen=True)
class StatusRule:
    """
    Threshold rule for a metric's status badge.

    Attributes:
        threshold: Values <= threshold are favourable
        good_text: Badge text when favourable
        bad_text: Badge text otherwise
    """
    threshold: float
    good_text: str
    bad_text: str

    def evaluate(self, value: float) -> Tuple[str, str]:
        if value <= self.threshold:
            return self.good_text, GOOD_COLOR
        return self.bad_text, BAD_COLOR


@dataclass(frozen=True)
class EnergyMetricSpec:
    """A single summary card."""
    key: str
    label: str
    lo: float
    hi: float
    decimals: int
    unit: str
    status: Optional[StatusRule] = None

    def render(self, sampler: RangeSampler) -> Dict[str, Any]:
        value = sampler.sample(self.lo, self.hi, self.decimals)
        card: Dict[str, Any] = {
            "label": self.label,
            "value": value,
            "unit": self.unit,
        }
        if self.status is not None:
            card["status"], card["color"] = self.status.evaluate(value)
        return card


CONSUMPTION_METRICS = (
    EnergyMetricSpec("totalConsumption", "Total Consumption", 60000, 150000, 0, "kWh"),
    EnergyMetricSpec("peakDemand", "Peak Demand", 400, 800, 0, "kW"),
    EnergyMetricSpec("averageDailyConsumption", "Average Daily Consumption", 2000, 5000, 0, "kWh"),
    EnergyMetricSpec("consumptionPerArea", "Consumption per Area", 0.8, 2.5, 2, "kWh/sqft"),
    EnergyMetricSpec(
        "changeFromLastMonth", "Change from Last Month", -15, 15, 0, "%",
        status=StatusRule(0, "Lower than last month", "Higher than last month"),
    ),
    EnergyMetricSpec(
        "plantEfficiency", "Plant Efficiency", 0.50, 0.90, 2, "kW/ton",
        status=StatusRule(0.70, "Efficient", "Needs attention"),
    ),
)

COST_METRICS = (
    EnergyMetricSpec("totalCost", "Total Cost", 7500, 22500, 2, "USD"),
    EnergyMetricSpec("energyCharges", "Energy Charges", 5000, 15000, 2, "USD"),
    EnergyMetricSpec("demandCharges", "Demand Charges", 1500, 6000, 2, "USD"),
    EnergyMetricSpec("costPerKwh", "Cost per kWh", 0.08, 0.25, 2, "USD/kWh"),
    EnergyMetricSpec("projectedMonthlyCost", "Projected Monthly Cost", 9000, 25000, 2, "USD"),
    EnergyMetricSpec(
        "budgetVariance", "Budget Variance", -20, 20, 0, "%",
        status=StatusRule(0, "Under budget", "Over budget"),
    ),
)

ENERGY_CATALOGS = {
    EnergySummaryType.CONSUMPTION: CONSUMPTION_METRICS,
    EnergySummaryType.COST: COST_METRICS,
}


def generate_energy_summary(
    summary_type: EnergySummaryType,
    sampler: RangeSampler
) -> Dict[str, Dict[str, Any]]:
    """
    Generate the summary cards for a catalog.

    Args:
        summary_type: consumption or cost
        sampler: Random source

    Returns:
        Mapping of metric key to {label, value, unit[, status, color]}
    """
    return {
        spec.key: spec.render(sampler)
        for spec in ENERGY_CATALOGS[summary_type]
    }
