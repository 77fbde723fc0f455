"""
Request Parameter Validation

Every endpoint validates its query parameters before any generation
work runs. A failed check raises ValidationError, which the API layer
turns into an HTTP 400 error envelope.

Checks provided:
- Presence: required parameters exist and are not blank
- Enumerations: a value belongs to an allowed set
- Dates: a date string parses to a midnight datetime
- Equipment lists: comma-separated names become field-name prefixes
"""

import logging
import re
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Type, TypeVar

import pandas as pd

from .errors import ValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Formats accepted for the `date` parameter, tried in order
DATE_FORMATS = (
    "%Y-%m-%d",
    "%m-%d-%Y",
    "%m/%d/%Y",
)

# Letters, single underscores between words, optional trailing number
EQUIPMENT_PATTERN = re.compile(r"^([a-z]+(?:_[a-z]+)*)(?:_?(\d+))?$")

# Each equipment adds eight fields to every analytics record
MAX_EQUIPMENTS = 20

# Time axes are pandas timestamps; the latest date leaves room for the
# 42-hour analytics span
MIN_DATE = pd.Timestamp.min.ceil("D").to_pydatetime()
MAX_DATE = (pd.Timestamp.max - pd.Timedelta(days=2)).floor("D").to_pydatetime()


def require_params(
    params: Mapping[str, Optional[str]],
    names: Iterable[str]
) -> Dict[str, str]:
    """
    Ensure each named parameter is present and non-blank.

    Args:
        params: Raw query parameters (missing ones may map to None)
        names: Required parameter names

    Returns:
        Mapping of name to stripped value

    Raises:
        ValidationError: Listing every missing parameter
    """
    values = {}
    missing = []

    for name in names:
        raw = params.get(name)
        if raw is None or not str(raw).strip():
            missing.append(name)
        else:
            values[name] = str(raw).strip()

    if missing:
        raise ValidationError(
            f"Missing required parameter(s): {', '.join(missing)}"
        )

    return values


def parse_choice(value: str, choices: Type[E], param: str) -> E:
    """
    Map a raw value onto an enum member by value.

    Args:
        value: Raw parameter value
        choices: Enum whose values are the allowed strings
        param: Parameter name, used in the error message

    Returns:
        The matching enum member

    Raises:
        ValidationError: If the value is not one of the allowed values
    """
    for member in choices:
        if member.value == value:
            return member

    allowed = ", ".join(str(m.value) for m in choices)
    raise ValidationError(
        f"Invalid {param} '{value}'. Allowed values: {allowed}"
    )


def parse_date(value: str, param: str = "date") -> datetime:
    """
    Parse a date parameter to midnight of that day.

    Accepts YYYY-MM-DD, MM-DD-YYYY, MM/DD/YYYY and ISO 8601 date-times,
    between MIN_DATE and MAX_DATE.

    Raises:
        ValidationError: If the string cannot be parsed or is out of range
    """
    day = _parse_day(value.strip())
    if day is None:
        logger.debug(f"Rejected unparseable {param}: {value!r}")
        raise ValidationError(f"Invalid {param} '{value}'")

    if not MIN_DATE <= day <= MAX_DATE:
        raise ValidationError(
            f"Invalid {param} '{value}'. Dates must fall between "
            f"{MIN_DATE.date()} and {MAX_DATE.date()}"
        )

    return day


def _parse_day(text: str) -> Optional[datetime]:
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
            return parsed.replace(hour=0, minute=0, second=0, microsecond=0)
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None

    return datetime(parsed.year, parsed.month, parsed.day)


def equipment_prefix(name: str) -> str:
    """
    Turn an equipment name into a record field prefix.

    A trailing number is separated by an underscore:
    "chiller2" -> "chiller_2", "cwpump10" -> "cwpump_10", "tower" -> "tower".

    Raises:
        ValidationError: If the name is not letters (single underscores
            between words) followed by optional digits
    """
    match = EQUIPMENT_PATTERN.match(name)
    if not match:
        raise ValidationError(f"Invalid equipment name '{name}'")

    base, number = match.groups()
    return f"{base}_{number}" if number else base


def parse_equipment_list(value: str) -> List[str]:
    """
    Parse a comma-separated equipment list into field prefixes.

    Entries are stripped and lower-cased; empty entries and duplicates
    are dropped, keeping first-seen order. At most MAX_EQUIPMENTS
    distinct entries are accepted.

    Args:
        value: e.g. "Chiller1, pump2"

    Returns:
        e.g. ["chiller_1", "pump_2"]

    Raises:
        ValidationError: If no usable entry remains, an entry is malformed,
            or there are more than MAX_EQUIPMENTS entries
    """
    prefixes: List[str] = []

    for entry in value.split(","):
        name = entry.strip().lower()
        if not name:
            continue
        prefix = equipment_prefix(name)
        if prefix not in prefixes:
            prefixes.append(prefix)

    if not prefixes:
        raise ValidationError("Parameter 'equipments' contains no equipment names")
    if len(prefixes) > MAX_EQUIPMENTS:
        raise ValidationError(
            f"Parameter 'equipments' lists {len(prefixes)} equipment; "
            f"at most {MAX_EQUIPMENTS} are allowed"
        )

    return prefixes
