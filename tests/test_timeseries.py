"""
Tests for Range Sampling and Time Axes

Run with: pytest tests/test_timeseries.py -v
"""

import random
from datetime import datetime, timedelta

import pytest

from core.sampling import RangeSampler
from core.timeseries import (
    MetricSpec,
    StepUnit,
    build_time_axis,
    format_timestamp,
    generate_series,
)


class TestRangeSampler:
    """Test bounded sampling."""

    def setup_method(self):
        self.sampler = RangeSampler(seed=42)

    def test_values_stay_in_range(self):
        """Rounded draws never leave [lo, hi]."""
        for _ in range(500):
            value = self.sampler.sample(0.40, 0.60, 2)
            assert 0.40 <= value <= 0.60

    def test_rounding_precision(self):
        for _ in range(100):
            value = self.sampler.sample(0.0, 1.0, 2)
            assert round(value, 2) == value

    def test_zero_decimals_returns_int(self):
        value = self.sampler.sample(200, 600, 0)
        assert isinstance(value, int)
        assert 200 <= value <= 600

    def test_degenerate_range(self):
        assert self.sampler.sample(5.0, 5.0, 1) == 5.0

    def test_invalid_range_rejected(self):
        with pytest.raises(ValueError):
            self.sampler.sample(10, 1, 2)

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError):
            self.sampler.sample(0, 1, -1)

    def test_same_seed_same_values(self):
        a = RangeSampler(seed=7)
        b = RangeSampler(seed=7)
        assert [a.sample(0, 100, 2) for _ in range(10)] == [b.sample(0, 100, 2) for _ in range(10)]

    def test_injected_generator(self):
        """An existing random.Random is used as-is."""
        rng = random.Random(3)
        sampler = RangeSampler(rng=rng)
        assert sampler.rng is rng

    def test_choice_and_randint(self):
        options = ("low", "medium", "high")
        assert self.sampler.choice(options) in options
        assert 1 <= self.sampler.randint(1, 3) <= 3


class TestBuildTimeAxis:
    """Test time axis construction."""

    def test_minute_steps(self):
        base = datetime(2026, 10, 19)
        axis = build_time_axis(base, StepUnit.MINUTES, 15, 70)

        assert len(axis) == 70
        assert axis[0] == base
        assert axis[-1] == base + timedelta(minutes=15 * 69)
        for earlier, later in zip(axis, axis[1:]):
            assert later - earlier == timedelta(minutes=15)

    def test_hour_steps_cross_midnight(self):
        base = datetime(2026, 10, 19)
        axis = build_time_axis(base, StepUnit.HOURS, 2, 22)

        assert len(axis) == 22
        assert axis[-1] == datetime(2026, 10, 20, 18, 0)

    def test_day_steps(self):
        axis = build_time_axis(datetime(2026, 2, 1), StepUnit.DAYS, 1, 28)
        assert axis[-1] == datetime(2026, 2, 28)

    def test_month_steps_follow_calendar(self):
        axis = build_time_axis(datetime(2025, 11, 1), StepUnit.MONTHS, 1, 12)

        assert len(axis) == 12
        assert axis[0] == datetime(2025, 11, 1)
        assert axis[2] == datetime(2026, 1, 1)
        assert axis[-1] == datetime(2026, 10, 1)
        assert all(ts.day == 1 for ts in axis)

    def test_returns_plain_datetimes(self):
        axis = build_time_axis(datetime(2026, 1, 1), StepUnit.DAYS, 1, 2)
        assert all(type(ts) is datetime for ts in axis)

    def test_empty_axis(self):
        assert build_time_axis(datetime(2026, 1, 1), StepUnit.DAYS, 1, 0) == []

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            build_time_axis(datetime(2026, 1, 1), StepUnit.DAYS, 0, 5)
        with pytest.raises(ValueError):
            build_time_axis(datetime(2026, 1, 1), StepUnit.DAYS, 1, -1)


class TestFormatTimestamp:
    """Test label formats per step unit."""

    def test_intraday_format(self):
        ts = datetime(2026, 3, 7, 9, 45)
        assert format_timestamp(ts, StepUnit.MINUTES) == "03-07-2026 09:45"
        assert format_timestamp(ts, StepUnit.HOURS) == "03-07-2026 09:45"

    def test_daily_format(self):
        assert format_timestamp(datetime(2026, 10, 7), StepUnit.DAYS) == "Oct 07"

    def test_monthly_format(self):
        assert format_timestamp(datetime(2026, 1, 1), StepUnit.MONTHS) == "Jan 2026"


class TestGenerateSeries:
    """Test generic record generation."""

    def test_record_shape_and_bounds(self):
        metrics = [
            MetricSpec("temp", 6.0, 8.0, 2),
            MetricSpec("load", 20, 100, 0),
        ]
        records = generate_series(
            datetime(2026, 10, 19), StepUnit.HOURS, 1, 24, metrics, RangeSampler(seed=1)
        )

        assert len(records) == 24
        for record in records:
            assert list(record.keys()) == ["date", "temp", "load"]
            assert 6.0 <= record["temp"] <= 8.0
            assert isinstance(record["load"], int)
            assert 20 <= record["load"] <= 100

    def test_labels_ascending(self):
        records = generate_series(
            datetime(2026, 10, 19), StepUnit.MINUTES, 15, 10,
            [MetricSpec("x", 0, 1, 2)], RangeSampler(seed=1)
        )
        stamps = [datetime.strptime(r["date"], "%m-%d-%Y %H:%M") for r in records]
        assert stamps == sorted(stamps)
        assert len(set(stamps)) == len(stamps)
