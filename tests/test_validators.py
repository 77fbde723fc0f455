"""
Tests for Request Parameter Validation

These tests verify that missing, blank and out-of-set parameters are
rejected before any payload is generated.

Run with: pytest tests/test_validators.py -v
"""

from datetime import datetime

import pytest

from core.errors import ValidationError
from core.validators import (
    MAX_DATE,
    MAX_EQUIPMENTS,
    MIN_DATE,
    equipment_prefix,
    parse_choice,
    parse_date,
    parse_equipment_list,
    require_params,
)
from engine.efficiency import EquipmentType
from engine.management import ReportPeriod


class TestRequireParams:
    """Test presence checks."""

    def test_all_present(self):
        values = require_params(
            {"siteId": "S1", "date": " 2026-10-19 "},
            ["siteId", "date"]
        )
        assert values == {"siteId": "S1", "date": "2026-10-19"}

    def test_missing_parameter(self):
        with pytest.raises(ValidationError) as exc_info:
            require_params({"siteId": "S1"}, ["siteId", "date"])

        assert "date" in exc_info.value.message
        assert exc_info.value.status_code == 400

    def test_none_and_blank_are_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            require_params({"siteId": None, "period": "   "}, ["siteId", "period"])

        assert "siteId" in exc_info.value.message
        assert "period" in exc_info.value.message


class TestParseChoice:
    """Test enumerated parameters."""

    def test_valid_value(self):
        assert parse_choice("cwPump", EquipmentType, "equipmentType") == EquipmentType.CW_PUMP

    def test_values_are_case_sensitive(self):
        with pytest.raises(ValidationError):
            parse_choice("CHILLER", EquipmentType, "equipmentType")

    def test_error_lists_allowed_values(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_choice("next-year", ReportPeriod, "period")

        message = exc_info.value.message
        assert "next-year" in message
        assert "this-year" in message
        assert "last-month" in message


class TestParseDate:
    """Test date parsing."""

    @pytest.mark.parametrize("raw", [
        "2026-10-19",
        "10-19-2026",
        "10/19/2026",
        "2026-10-19T13:45:00",
        "2026-10-19T13:45:00Z",
    ])
    def test_accepted_formats(self, raw):
        assert parse_date(raw) == datetime(2026, 10, 19)

    def test_result_is_naive_midnight(self):
        parsed = parse_date("2026-10-19T23:59:59+05:00")
        assert parsed.tzinfo is None
        assert (parsed.hour, parsed.minute) == (0, 0)

    @pytest.mark.parametrize("raw", ["yesterday", "2026-13-01", "19.10.2026", "2026-02-30"])
    def test_rejected_formats(self, raw):
        with pytest.raises(ValidationError):
            parse_date(raw)

    @pytest.mark.parametrize("raw", ["1600-01-01", "2300-01-01", "12-31-9999"])
    def test_out_of_range_dates_rejected(self, raw):
        """Dates the time axis cannot represent are client errors."""
        with pytest.raises(ValidationError) as exc_info:
            parse_date(raw)

        assert exc_info.value.status_code == 400

    def test_range_limits_accepted(self):
        assert parse_date(MIN_DATE.strftime("%Y-%m-%d")) == MIN_DATE
        assert parse_date(MAX_DATE.strftime("%Y-%m-%d")) == MAX_DATE


class TestEquipmentList:
    """Test equipment list parsing and prefixes."""

    def test_prefix_splits_trailing_number(self):
        assert equipment_prefix("chiller2") == "chiller_2"
        assert equipment_prefix("cwpump10") == "cwpump_10"

    def test_prefix_without_number(self):
        assert equipment_prefix("tower") == "tower"

    def test_prefix_keeps_existing_separator(self):
        assert equipment_prefix("chiller_3") == "chiller_3"

    def test_invalid_name(self):
        with pytest.raises(ValidationError):
            equipment_prefix("2chiller")
        with pytest.raises(ValidationError):
            equipment_prefix("chiller-2")

    def test_list_is_lowercased_and_stripped(self):
        assert parse_equipment_list("Chiller1, PUMP2") == ["chiller_1", "pump_2"]

    def test_empty_entries_and_duplicates_dropped(self):
        assert parse_equipment_list("chiller1,,chiller1, ,pump2") == ["chiller_1", "pump_2"]

    def test_no_entries(self):
        with pytest.raises(ValidationError):
            parse_equipment_list(" , ,")

    @pytest.mark.parametrize("name", ["chiller_", "chiller_1_", "a__1", "_pump1", "cw__pump"])
    def test_stray_underscores_rejected(self, name):
        with pytest.raises(ValidationError):
            equipment_prefix(name)

    def test_multi_word_prefix(self):
        assert equipment_prefix("cw_pump1") == "cw_pump_1"
        assert equipment_prefix("cooling_tower") == "cooling_tower"

    def test_list_at_limit(self):
        names = ",".join(f"chiller{n}" for n in range(1, MAX_EQUIPMENTS + 1))
        assert len(parse_equipment_list(names)) == MAX_EQUIPMENTS

    def test_list_over_limit(self):
        names = ",".join(f"chiller{n}" for n in range(1, MAX_EQUIPMENTS + 2))
        with pytest.raises(ValidationError) as exc_info:
            parse_equipment_list(names)

        assert str(MAX_EQUIPMENTS) in exc_info.value.message

    def test_duplicates_do_not_count_toward_limit(self):
        names = ",".join(["chiller1"] * (MAX_EQUIPMENTS + 5))
        assert parse_equipment_list(names) == ["chiller_1"]
