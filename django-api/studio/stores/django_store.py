"""Django ORM implementation of the StudioStore."""

import logging
from datetime import date

from django.db import transaction

from studio import models
from studio.domain import (
    Activity,
    AttendanceChanges,
    AttendanceRecord,
    DateRange,
    Level,
    Notification,
    Person,
    PersonStatus,
    Session,
    SessionType,
    Space,
    Specialist,
    StudioSnapshot,
)
from studio.domain.errors import SessionNotFoundError
from studio.stores.interfaces import StudioStore

logger = logging.getLogger(__name__)


def _id(value) -> str | None:
    return str(value) if value is not None else None


def _ids(people) -> tuple[str, ...]:
    return tuple(str(person.pk) for person in people.all())


def _to_person(row: models.Person) -> Person:
    return Person(
        id=str(row.pk),
        name=row.name,
        status=PersonStatus(row.status),
        phone=row.phone,
        payment_due_date=row.payment_due_date,
        vacations=tuple(
            DateRange(start=v.start_date, end=v.end_date) for v in row.vacations.all()
        ),
    )


def _to_session(row: models.Session) -> Session:
    return Session(
        id=str(row.pk),
        day_of_week=row.day_of_week,
        time=row.time,
        session_type=SessionType(row.session_type),
        activity_id=_id(row.activity_id),
        specialist_id=_id(row.specialist_id),
        space_id=_id(row.space_id),
        level_id=_id(row.level_id),
        person_ids=_ids(row.people),
    )


def _to_attendance(row: models.AttendanceRecord) -> AttendanceRecord:
    return AttendanceRecord(
        session_id=str(row.session_id),
        date=row.date,
        present_ids=_ids(row.present),
        absent_ids=_ids(row.absent),
        justified_absence_ids=_ids(row.justified_absences),
        one_time_attendees=_ids(row.one_time_attendees),
    )


class DjangoStudioStore(StudioStore):
    """Database-backed studio store using Django ORM."""

    def load_snapshot(self) -> StudioSnapshot:
        people = models.Person.objects.prefetch_related("vacations")
        sessions = models.Session.objects.prefetch_related("people")
        attendance = models.AttendanceRecord.objects.prefetch_related(
            "present", "absent", "justified_absences", "one_time_attendees"
        )
        return StudioSnapshot(
            people=tuple(_to_person(row) for row in people),
            sessions=tuple(_to_session(row) for row in sessions),
            attendance=tuple(_to_attendance(row) for row in attendance),
            notifications=tuple(
                Notification(
                    id=str(row.pk),
                    type=row.type,
                    created_at=row.created_at,
                    session_id=_id(row.session_id),
                    person_id=_id(row.person_id),
                )
                for row in models.Notification.objects.all()
            ),
            activities=tuple(
                Activity(id=str(row.pk), name=row.name)
                for row in models.Activity.objects.all()
            ),
            specialists=tuple(
                Specialist(id=str(row.pk), name=row.name, phone=row.phone)
                for row in models.Specialist.objects.all()
            ),
            spaces=tuple(
                Space(id=str(row.pk), name=row.name, capacity=row.capacity)
                for row in models.Space.objects.all()
            ),
            levels=tuple(
                Level(id=str(row.pk), name=row.name)
                for row in models.Level.objects.all()
            ),
        )

    @transaction.atomic
    def enroll_from_waitlist(
        self, notification_id: str, session_id: str, person_id: str
    ) -> bool:
        deleted, _ = models.Notification.objects.filter(pk=notification_id).delete()
        if not deleted:
            return False
        session = models.Session.objects.filter(pk=session_id).first()
        if session is None:
            raise SessionNotFoundError(session_id)
        session.people.add(person_id)
        logger.debug("Enrolled %s in %s from waitlist", person_id, session_id)
        return True

    def dismiss_notification(self, notification_id: str) -> bool:
        deleted, _ = models.Notification.objects.filter(pk=notification_id).delete()
        logger.debug("Dismissed notification %s (deleted=%s)", notification_id, deleted)
        return bool(deleted)

    @transaction.atomic
    def record_attendance(
        self, session_id: str, day: date, changes: AttendanceChanges
    ) -> AttendanceRecord:
        record, created = models.AttendanceRecord.objects.select_for_update().get_or_create(
            session_id=session_id, date=day
        )
        record.present.set(changes.present_ids)
        record.absent.set(changes.absent_ids)
        record.justified_absences.set(changes.justified_absence_ids)
        record.one_time_attendees.set(changes.one_time_attendees)
        record.save(update_fields=["updated_at"])
        logger.debug(
            "%s attendance for %s on %s",
            "Created" if created else "Replaced",
            session_id,
            day,
        )
        return _to_attendance(record)
