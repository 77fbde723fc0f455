"""
Management Series Generators

Tonnage history and the energy report dashboard both cover a named
reporting period. The period decides where the series starts, whether
it steps by day or by month, and how many points it has:

    thisMonth / this-month   daily,   1st of this month .. today
    lastMonth / last-month   daily,   whole previous calendar month
    past-month               daily,   trailing 30 days ending today
    thisYear / this-year     monthly, January .. current month
    last-year                monthly, whole previous calendar year
    past-year                monthly, trailing 12 months ending this month
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Dict, List

import pandas as pd

from core.sampling import RangeSampler
from core.timeseries import MetricSpec, StepUnit, generate_series


class TonnagePeriod(str, Enum):
    """Periods offered by the tonnage history chart."""
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    THIS_YEAR = "thisYear"


class ReportPeriod(str, Enum):
    """Periods offered by the energy report dashboard."""
    THIS_YEAR = "this-year"
    PAST_YEAR = "past-year"
    LAST_YEAR = "last-year"
    THIS_MONTH = "this-month"
    PAST_MONTH = "past-month"
    LAST_MONTH = "last-month"


@dataclass(frozen=True)
class PeriodWindow:
    """
    Shape of the time axis for a reporting period.

    Attributes:
        start: First timestamp (midnight)
        unit: DAYS or MONTHS
        count: Number of points
    """
    start: datetime
    unit: StepUnit
    count: int


PAST_MONTH_DAYS = 30
PAST_YEAR_MONTHS = 12

TONNAGE_METRICS = {
    StepUnit.DAYS: (
        MetricSpec("currentYear", 800, 1500, 0),
        MetricSpec("previousYear", 800, 1500, 0),
    ),
    StepUnit.MONTHS: (
        MetricSpec("currentYear", 24000, 45000, 0),
        MetricSpec("previousYear", 24000, 45000, 0),
    ),
}

REPORT_METRICS = {
    StepUnit.DAYS: (
        MetricSpec("consumption", 2000, 5000, 0),    # kWh
        MetricSpec("demand", 300, 600, 0),           # kW
        MetricSpec("cost", 250, 750, 2),             # USD
    ),
    StepUnit.MONTHS: (
        MetricSpec("consumption", 60000, 150000, 0),
        MetricSpec("demand", 400, 800, 0),
        MetricSpec("cost", 7500, 22500, 2),
    ),
}


# =========================================
# Period Windows
# =========================================

def _midnight(day: date) -> datetime:
    return datetime.combine(day, time())


def _month_start(day: date) -> datetime:
    return _midnight(day.replace(day=1))


def _this_month(today: date) -> PeriodWindow:
    return PeriodWindow(_month_start(today), StepUnit.DAYS, today.day)


def _last_month(today: date) -> PeriodWindow:
    last_day = today.replace(day=1) - timedelta(days=1)
    return PeriodWindow(_month_start(last_day), StepUnit.DAYS, last_day.day)


def _this_year(today: date) -> PeriodWindow:
    return PeriodWindow(_midnight(date(today.year, 1, 1)), StepUnit.MONTHS, today.month)


def tonnage_window(period: TonnagePeriod, today: date) -> PeriodWindow:
    """Resolve a tonnage period relative to today."""
    if period == TonnagePeriod.THIS_MONTH:
        return _this_month(today)
    if period == TonnagePeriod.LAST_MONTH:
        return _last_month(today)
    return _this_year(today)


def report_window(period: ReportPeriod, today: date) -> PeriodWindow:
    """Resolve a report dashboard period relative to today."""
    if period == ReportPeriod.THIS_MONTH:
        return _this_month(today)
    if period == ReportPeriod.LAST_MONTH:
        return _last_month(today)
    if period == ReportPeriod.PAST_MONTH:
        start = _midnight(today - timedelta(days=PAST_MONTH_DAYS - 1))
        return PeriodWindow(start, StepUnit.DAYS, PAST_MONTH_DAYS)
    if period == ReportPeriod.THIS_YEAR:
        return _this_year(today)
    if period == ReportPeriod.LAST_YEAR:
        start = _midnight(date(today.year - 1, 1, 1))
        return PeriodWindow(start, StepUnit.MONTHS, PAST_YEAR_MONTHS)

    # PAST_YEAR: the current month is the last of twelve
    start = pd.Timestamp(_month_start(today)) - pd.DateOffset(months=PAST_YEAR_MONTHS - 1)
    return PeriodWindow(start.to_pydatetime(), StepUnit.MONTHS, PAST_YEAR_MONTHS)


# =========================================
# Generators
# =========================================

def generate_tonnage_series(
    period: TonnagePeriod,
    today: date,
    sampler: RangeSampler
) -> List[Dict[str, Any]]:
    """
    Generate current-vs-previous year tonnage for a period.

    Returns:
        Records shaped {"date", "currentYear", "previousYear"}
    """
    window = tonnage_window(period, today)
    return generate_series(
        base=window.start,
        unit=window.unit,
        size=1,
        count=window.count,
        metrics=TONNAGE_METRICS[window.unit],
        sampler=sampler,
    )


def generate_report_data(
    period: ReportPeriod,
    today: date,
    sampler: RangeSampler
) -> List[Dict[str, Any]]:
    """
    Generate the energy report dashboard series for a period.

    Each record carries consumption, demand and cost for its day or month,
    plus totalCost: the running sum of cost up to and including it.

    Returns:
        Records shaped {"date", "consumption", "demand", "cost", "totalCost"}
    """
    window = report_window(period, today)
    records = generate_series(
        base=window.start,
        unit=window.unit,
        size=1,
        count=window.count,
        metrics=REPORT_METRICS[window.unit],
        sampler=sampler,
    )

    running_total = 0.0
    for record in records:
        running_total += record["cost"]
        record["totalCost"] = round(running_total, 2)

    return records
