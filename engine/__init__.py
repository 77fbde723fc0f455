"""
Engine Module - Synthetic Payload Generation

One generator per dashboard endpoint. Each is a pure function of its
validated parameters and a RangeSampler, so tests can pass a seeded one.

Key Components:
- efficiency: intraday actual/target efficiency curves per equipment type
- analytics: multi-equipment 2-hourly metric series
- management: tonnage history and energy report series per period
- notifications: alert feed sampled from a template catalog
- energy: consumption/cost summary cards

Usage:
    from core.sampling import RangeSampler
    from engine import EquipmentType, generate_efficiency_rows

    rows = generate_efficiency_rows(
        EquipmentType.CHILLER,
        datetime(2026, 10, 19),
        RangeSampler(seed=7)
    )
"""

from .analytics import generate_analytics_data
from .efficiency import EquipmentType, generate_efficiency_rows
from .energy import EnergySummaryType, generate_energy_summary
from .management import (
    ReportPeriod,
    TonnagePeriod,
    generate_report_data,
    generate_tonnage_series,
)
from .notifications import generate_notifications

__all__ = [
    # Efficiency
    "EquipmentType",
    "generate_efficiency_rows",

    # Analytics
    "generate_analytics_data",

    # Management
    "TonnagePeriod",
    "ReportPeriod",
    "generate_tonnage_series",
    "generate_report_data",

    # Notifications
    "generate_notifications",

    # Energy summary
    "EnergySummaryType",
    "generate_energy_summary",
]

__version__ = "0.1.0"
