"""Unit tests for domain primitives and per-person derivations.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime
from uuid import uuid4

import pytest

from studio.domain import ClockTime, DateRange, Person, PersonStatus, SessionId
from studio.domain.people import PaymentStatus, is_on_vacation, payment_status


class TestClockTime:
    """Tests for ClockTime value object."""

    def test_from_string_parses_hours_and_minutes(self):
        clock = ClockTime.from_string("09:05")
        assert (clock.hour, clock.minute) == (9, 5)
        assert str(clock) == "09:05"

    @pytest.mark.parametrize("value", ["", "9", "ab:cd", "24:00", "10:60", "10-30"])
    def test_from_string_rejects_malformed(self, value):
        """Malformed or out-of-range times raise ValueError."""
        with pytest.raises(ValueError):
            ClockTime.from_string(value)

    def test_parse_returns_none_for_malformed(self):
        assert ClockTime.parse("later") is None
        assert ClockTime.parse(None) is None

    def test_on_combines_with_date(self):
        assert ClockTime(18, 30).on(date(2026, 10, 19)) == datetime(2026, 10, 19, 18, 30)


class TestDateRange:
    def test_bounds_are_inclusive(self):
        period = DateRange(date(2026, 1, 10), date(2026, 1, 20))
        assert date(2026, 1, 10) in period
        assert date(2026, 1, 20) in period
        assert date(2026, 1, 21) not in period

    def test_inverted_range_contains_nothing(self):
        period = DateRange(date(2026, 1, 20), date(2026, 1, 10))
        assert date(2026, 1, 15) not in period


class TestSessionId:
    """Tests for SessionId value object."""

    def test_from_string_valid_uuid(self):
        """SessionId.from_string normalizes a valid UUID."""
        value = uuid4()
        assert SessionId.from_string(str(value).upper()).value == str(value)

    def test_from_string_invalid_uuid(self):
        """SessionId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            SessionId.from_string("not-a-uuid")


class TestPaymentStatus:
    def test_unknown_without_due_date(self):
        """A person with no billing data is UNKNOWN, never an error."""
        person = Person(id="p1", name="Ana")
        assert payment_status(person, datetime(2026, 10, 19, 12)) is PaymentStatus.UNKNOWN

    def test_current_on_due_date(self):
        person = Person(id="p1", name="Ana", payment_due_date=date(2026, 10, 19))
        assert payment_status(person, datetime(2026, 10, 19, 23, 59)) is PaymentStatus.CURRENT

    def test_overdue_after_due_date(self):
        person = Person(id="p1", name="Ana", payment_due_date=date(2026, 10, 18))
        assert payment_status(person, date(2026, 10, 19)) is PaymentStatus.OVERDUE


class TestVacation:
    def test_no_vacation_data_means_not_on_vacation(self):
        assert not is_on_vacation(Person(id="p1", name="Ana"), date(2026, 10, 19))

    def test_on_vacation_within_any_range(self):
        person = Person(
            id="p1",
            name="Ana",
            status=PersonStatus.ACTIVE,
            vacations=(
                DateRange(date(2026, 1, 1), date(2026, 1, 15)),
                DateRange(date(2026, 10, 15), date(2026, 10, 19)),
            ),
        )
        assert is_on_vacation(person, datetime(2026, 10, 19, 20, 0))
        assert not is_on_vacation(person, date(2026, 10, 20))
