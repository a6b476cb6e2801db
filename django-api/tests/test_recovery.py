"""Unit tests for make-up class balances and the dashboard summary.

Run with: pytest tests/test_recovery.py -v
"""

from datetime import date

from studio.domain import (
    Activity,
    AttendanceRecord,
    DateRange,
    Level,
    Person,
    PersonStatus,
    Session,
    Space,
    Specialist,
    StudioSnapshot,
)
from studio.domain.recovery import pending_recovery_count, recovery_balances
from studio.domain.summary import dashboard_summary


def record(day: int, justified=(), one_time=(), session_id="s1") -> AttendanceRecord:
    return AttendanceRecord(
        session_id=session_id,
        date=date(2026, 10, day),
        justified_absence_ids=tuple(justified),
        one_time_attendees=tuple(one_time),
    )


class TestRecoveryBalances:
    def test_no_records_means_zero_balance(self):
        snapshot = StudioSnapshot(people=(Person(id="ana", name="Ana"),))
        assert recovery_balances(snapshot) == {"ana": 0}
        assert pending_recovery_count(snapshot) == 0

    def test_two_absences_and_one_make_up_leaves_one_pending(self):
        snapshot = StudioSnapshot(
            people=(Person(id="ana", name="Ana"),),
            attendance=(
                record(5, justified=["ana"]),
                record(12, justified=["ana"]),
                record(14, one_time=["ana"], session_id="s2"),
            ),
        )
        assert recovery_balances(snapshot) == {"ana": 1}
        assert pending_recovery_count(snapshot) == 1

    def test_negative_balance_is_kept_and_not_pending(self):
        """Drop-ins beyond owed make-ups drive the balance below zero."""
        snapshot = StudioSnapshot(
            people=(Person(id="ana", name="Ana"),),
            attendance=(record(5, one_time=["ana"]), record(12, one_time=["ana"])),
        )
        assert recovery_balances(snapshot) == {"ana": -2}
        assert pending_recovery_count(snapshot) == 0

    def test_inactive_and_unknown_people_are_ignored(self):
        snapshot = StudioSnapshot(
            people=(
                Person(id="ana", name="Ana"),
                Person(id="old", name="Old", status=PersonStatus.INACTIVE),
            ),
            attendance=(record(5, justified=["ana", "old", "ghost"]),),
        )
        assert recovery_balances(snapshot) == {"ana": 1}


class TestDashboardSummary:
    def test_counts(self):
        today = date(2026, 10, 19)
        snapshot = StudioSnapshot(
            people=(
                Person(id="late", name="Late", payment_due_date=date(2026, 10, 1)),
                Person(id="paid", name="Paid", payment_due_date=date(2026, 11, 1)),
                Person(id="away", name="Away", vacations=(DateRange(today, today),)),
                Person(
                    id="gone", name="Gone", status=PersonStatus.INACTIVE,
                    payment_due_date=date(2026, 1, 1),
                ),
            ),
            sessions=(
                Session(id="s1", day_of_week="Lunes", time="09:00"),
                Session(id="s2", day_of_week="Martes", time="09:00"),
            ),
            attendance=(record(12, justified=["paid"]),),
            activities=(Activity(id="a", name="Pilates"),),
            specialists=(Specialist(id="x", name="X"), Specialist(id="y", name="Y")),
            spaces=(Space(id="r", name="Room", capacity=4),),
            levels=(Level(id="l", name="Beginner"),),
        )

        summary = dashboard_summary(snapshot, today)

        assert summary.sessions == 2
        assert summary.active_people == 3
        assert summary.specialists == 2
        assert summary.activities == 1
        assert summary.spaces == 1
        assert summary.levels == 1
        assert summary.overdue == 1
        assert summary.on_vacation == 1
        assert summary.pending_recovery == 1
