"""
Core Module - BMS Mock Data API

Framework-agnostic building blocks shared by every generator:
- Error types (validation vs internal failures)
- Request parameter validation
- Bounded random sampling with an injectable source
- Time axis construction and labelling
"""

from .errors import MockDataError, ValidationError, InternalError
from .sampling import RangeSampler
from .timeseries import MetricSpec, StepUnit, build_time_axis, format_timestamp, generate_series
from .validators import (
    require_params,
    parse_choice,
    parse_date,
    parse_equipment_list,
    equipment_prefix,
)

__all__ = [
    # Errors
    "MockDataError",
    "ValidationError",
    "InternalError",

    # Sampling
    "RangeSampler",

    # Time series
    "MetricSpec",
    "StepUnit",
    "build_time_axis",
    "format_timestamp",
    "generate_series",

    # Validation
    "require_params",
    "parse_choice",
    "parse_date",
    "parse_equipment_list",
    "equipment_prefix",
]

__version__ = "0.1.0"
