"""Tests for calendar field validation."""

import pytest

from datekit import Constraint, GregorianCalendar, Unit, is_valid, is_valid_for


class TestIsValid:
    """Test range checks."""

    def test_empty_constraint_is_valid(self):
        assert is_valid(Constraint())
        assert Constraint().is_valid()

    def test_in_range(self):
        assert is_valid(Constraint(year=2025, month=12, day=31, hour=23, minute=59, second=59))
        assert is_valid(Constraint(weekday=7, quarter=4))

    @pytest.mark.parametrize(
        "fields",
        [
            {"month": 13},
            {"month": 0},
            {"day": 32},
            {"hour": 24},
            {"minute": 60},
            {"second": -1},
            {"weekday": 0},
            {"quarter": 5},
        ],
    )
    def test_out_of_range(self, fields):
        assert not Constraint(**fields).is_valid()

    def test_cross_field_not_checked(self):
        """February 31 passes the per-field check."""
        assert is_valid(Constraint(month=2, day=31))


class TestIsValidFor:
    """Test calendar checks."""

    def test_applies_as_offset(self, calendar):
        assert Constraint(month=2, day=31).is_valid_for(calendar)
        assert is_valid_for(Constraint(hour=5), calendar)

    def test_overflowing_year(self, calendar):
        assert not Constraint(year=10000).is_valid_for(calendar)

    def test_range_failure_short_circuits(self, calendar):
        assert not is_valid_for(Constraint(month=13), calendar)

    def test_uses_given_calendar(self):
        cal = GregorianCalendar("Asia/Tokyo")

        assert Constraint(day=1).is_valid_for(cal)


class TestConstraint:
    """Test constraint fields."""

    def test_present_fields(self):
        constraint = Constraint(year=2025, weekday=2)

        assert constraint.present() == {Unit.YEAR: 2025, Unit.WEEKDAY: 2}
        assert constraint.value(Unit.MONTH) is None

    def test_from_units(self):
        constraint = Constraint.from_units({Unit.MONTH: 3, Unit.DAY: 4})

        assert constraint == Constraint(month=3, day=4)
