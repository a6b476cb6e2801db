"""Unit tests for notification resolution.

Run with: pytest tests/test_notifications.py -v
"""

from datetime import datetime

from studio.domain import (
    Activity,
    DismissNotification,
    EnrollFromWaitlist,
    Notification,
    NotificationType,
    Person,
    PersonStatus,
    Session,
    StudioSnapshot,
)
from studio.domain.notifications import resolve_notifications


def at(hour: int) -> datetime:
    return datetime(2026, 10, 19, hour, 0)


def snapshot(*notifications: Notification, **overrides) -> StudioSnapshot:
    base = dict(
        people=(
            Person(id="ana", name="Ana"),
            Person(id="old", name="Old", status=PersonStatus.INACTIVE),
        ),
        activities=(Activity(id="yoga", name="Yoga"),),
        sessions=(
            Session(id="s1", day_of_week="Lunes", time="09:00", activity_id="yoga"),
            Session(id="orphan", day_of_week="Lunes", time="10:00", activity_id="deleted"),
        ),
        notifications=notifications,
    )
    return StudioSnapshot(**{**base, **overrides})


class TestWaitlist:
    def test_resolved_waitlist_exposes_enroll_and_dismiss(self):
        [resolved] = resolve_notifications(
            snapshot(Notification(id="n1", type="waitlist", created_at=at(9), session_id="s1", person_id="ana"))
        )
        assert not resolved.is_stale
        assert resolved.type is NotificationType.WAITLIST
        assert resolved.enroll == EnrollFromWaitlist("n1", "s1", "ana")
        assert resolved.dismiss == DismissNotification("n1")
        assert (resolved.person_name, resolved.activity_name) == ("Ana", "Yoga")
        assert (resolved.day_of_week, resolved.time) == ("Lunes", "09:00")

    def test_unresolved_references_make_it_stale(self):
        notifications = (
            Notification(id="no-session", type="waitlist", created_at=at(9), session_id="gone", person_id="ana"),
            Notification(id="no-person", type="waitlist", created_at=at(8), session_id="s1", person_id="gone"),
            Notification(id="no-activity", type="waitlist", created_at=at(7), session_id="orphan", person_id="ana"),
            Notification(id="inactive", type="waitlist", created_at=at(6), session_id="s1", person_id="old"),
        )
        resolved = resolve_notifications(snapshot(*notifications))

        assert [n.id for n in resolved] == ["no-session", "no-person", "no-activity", "inactive"]
        assert all(n.is_stale and n.enroll is None for n in resolved)
        assert all(n.dismiss == DismissNotification(n.id) for n in resolved)


class TestChurnRisk:
    def test_active_person_is_dismiss_only(self):
        [resolved] = resolve_notifications(
            snapshot(Notification(id="c1", type="churnRisk", created_at=at(9), person_id="ana"))
        )
        assert resolved.type is NotificationType.CHURN_RISK
        assert resolved.enroll is None
        assert resolved.person_name == "Ana"

    def test_inactive_or_missing_person_is_dropped(self):
        resolved = resolve_notifications(
            snapshot(
                Notification(id="c1", type="churnRisk", created_at=at(9), person_id="old"),
                Notification(id="c2", type="churnRisk", created_at=at(9), person_id="gone"),
            )
        )
        assert resolved == []


def test_unknown_types_are_dropped():
    assert resolve_notifications(
        snapshot(Notification(id="x", type="birthday", created_at=at(9), person_id="ana"))
    ) == []


def test_newest_first():
    resolved = resolve_notifications(
        snapshot(
            Notification(id="old", type="churnRisk", created_at=at(7), person_id="ana"),
            Notification(id="new", type="churnRisk", created_at=at(11), person_id="ana"),
            Notification(id="mid", type="waitlist", created_at=at(9), session_id="s1", person_id="ana"),
        )
    )
    assert [n.id for n in resolved] == ["new", "mid", "old"]
