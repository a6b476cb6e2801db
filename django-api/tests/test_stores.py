"""Tests for the Django ORM store.

Run with: pytest tests/test_stores.py -v
"""

from datetime import date, timedelta
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError

from studio import models
from studio.domain import AttendanceChanges, DateRange, PersonStatus, SessionType
from studio.domain.errors import SessionNotFoundError
from studio.stores import DjangoStudioStore


@pytest.mark.django_db
class TestLoadSnapshot:
    def test_snapshot_mirrors_database(self, studio: dict, today: date):
        ana = studio["ana"]
        models.VacationPeriod.objects.create(
            person=ana, start_date=today, end_date=today + timedelta(days=3)
        )
        models.Level.objects.create(name="Beginner")

        snapshot = DjangoStudioStore().load_snapshot()

        person = snapshot.person(str(ana.pk))
        assert person.status is PersonStatus.ACTIVE
        assert person.vacations == (DateRange(today, today + timedelta(days=3)),)
        session = snapshot.session(str(studio["session"].pk))
        assert session.session_type is SessionType.GROUP
        assert session.person_ids == (str(ana.pk),)
        assert session.space_id == str(studio["space"].pk)
        assert snapshot.space(session.space_id).capacity == 2
        assert len(snapshot.levels) == 1

    def test_deleted_references_become_unresolved(self, studio: dict):
        studio["space"].delete()

        snapshot = DjangoStudioStore().load_snapshot()

        assert snapshot.session(str(studio["session"].pk)).space_id is None


@pytest.mark.django_db
class TestCommands:
    def test_record_attendance_creates_then_replaces(self, studio: dict, today: date):
        store = DjangoStudioStore()
        session_id = str(studio["session"].pk)
        ana, bruno = str(studio["ana"].pk), str(studio["bruno"].pk)

        store.record_attendance(session_id, today, AttendanceChanges(present_ids=(ana,)))
        record = store.record_attendance(
            session_id, today, AttendanceChanges(absent_ids=(ana,), one_time_attendees=(bruno,))
        )

        assert models.AttendanceRecord.objects.count() == 1
        assert record.present_ids == ()
        assert record.absent_ids == (ana,)
        assert record.one_time_attendees == (bruno,)

    def test_enroll_from_missing_notification_returns_false(self, studio: dict):
        store = DjangoStudioStore()
        assert not store.enroll_from_waitlist(
            "00000000-0000-0000-0000-000000000000",
            str(studio["session"].pk),
            str(studio["bruno"].pk),
        )
        assert not studio["session"].people.filter(pk=studio["bruno"].pk).exists()

    def test_dismiss_notification(self, studio: dict):
        notification = models.Notification.objects.create(type="churnRisk", person=studio["ana"])
        store = DjangoStudioStore()

        assert store.dismiss_notification(str(notification.pk))
        assert not store.dismiss_notification(str(notification.pk))

    def test_enroll_into_deleted_session_keeps_notification(self, studio: dict):
        """Given a session deleted after the check, enrollment fails and rolls back."""
        notification = models.Notification.objects.create(
            type="waitlist", session=studio["session"], person=studio["bruno"]
        )
        store = DjangoStudioStore()

        with pytest.raises(SessionNotFoundError):
            store.enroll_from_waitlist(
                str(notification.pk), str(uuid4()), str(studio["bruno"].pk)
            )
        assert models.Notification.objects.filter(pk=notification.pk).exists()


@pytest.mark.django_db
class TestSessionModel:
    @pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "noon"])
    def test_time_must_be_zero_padded(self, studio: dict, value: str):
        session = studio["session"]
        session.time = value

        with pytest.raises(ValidationError):
            session.full_clean()

    def test_padded_time_is_valid(self, studio: dict):
        session = studio["session"]
        session.time = "09:00"
        session.full_clean()
