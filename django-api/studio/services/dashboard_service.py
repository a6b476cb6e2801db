"""Dashboard service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate identifiers and command preconditions
- Run the derivations against a fresh snapshot and a reference instant
- Return domain values or raise domain errors
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timedelta

from django.conf import settings
from django.utils import timezone

from studio.domain import (
    AttendanceChanges,
    AttendanceRecord,
    NotificationId,
    PersonId,
    Session,
    SessionId,
    StudioSnapshot,
)
from studio.domain.errors import (
    AttendanceWindowClosedError,
    InvalidDateError,
    InvalidFilterError,
    InvalidNotificationIdError,
    InvalidPersonIdError,
    InvalidRollCallError,
    InvalidSessionIdError,
    NotificationNotFoundError,
    PersonNotFoundError,
    SessionNotFoundError,
    SessionNotHeldError,
    StaleNotificationError,
)
from studio.domain.notifications import (
    ResolvedNotification,
    resolve_notification,
    resolve_notifications,
)
from studio.domain.schedule import (
    SessionFilters,
    SessionOccupancy,
    SessionRoster,
    TimeOfDay,
    attendance_allowed,
    session_roster,
    sessions_for_day,
    weekday_name,
)
from studio.domain.summary import DashboardSummary, dashboard_summary
from studio.stores.interfaces import StudioStore

logger = logging.getLogger(__name__)

NO_RESTRICTION = ("", "all")


class DashboardService:
    """Service for dashboard queries and the commands it can issue."""

    def __init__(
        self,
        store: StudioStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._clock = clock
        self._window = timedelta(minutes=settings.STUDIO_ATTENDANCE_WINDOW_MINUTES)
        self._nearly_full = settings.STUDIO_NEARLY_FULL_THRESHOLD

    def summary(self, now: datetime | None = None) -> DashboardSummary:
        """Return the dashboard card counts."""
        return dashboard_summary(self._store.load_snapshot(), self._now(now))

    def sessions_for_day(
        self,
        day: str | date | None = None,
        activity_id: str | None = None,
        space_id: str | None = None,
        specialist_id: str | None = None,
        time_of_day: str | None = None,
        now: datetime | None = None,
    ) -> list[SessionOccupancy]:
        """Return the sessions held on `day` (today by default), sorted by time.

        Raises:
            InvalidDateError: If `day` is not an ISO date.
            InvalidFilterError: If `time_of_day` is not a known bucket.
        """
        now = self._now(now)
        filters = SessionFilters(
            activity_id=_restriction(activity_id),
            space_id=_restriction(space_id),
            specialist_id=_restriction(specialist_id),
            time_of_day=_time_of_day(time_of_day),
        )
        return sessions_for_day(
            self._store.load_snapshot(),
            self._day(day, now),
            now,
            filters,
            window=self._window,
            nearly_full_threshold=self._nearly_full,
        )

    def session_roster(
        self,
        session_id: str,
        day: str | date | None = None,
        now: datetime | None = None,
    ) -> SessionRoster:
        """Return the people enrolled in one occurrence of a session.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            InvalidDateError: If `day` is not an ISO date.
        """
        now = self._now(now)
        snapshot = self._store.load_snapshot()
        session = self._get_session(snapshot, session_id)
        return session_roster(
            session,
            self._day(day, now),
            snapshot,
            now,
            window=self._window,
            nearly_full_threshold=self._nearly_full,
        )

    def notifications(self) -> list[ResolvedNotification]:
        """Return the displayable notifications, newest first."""
        return resolve_notifications(self._store.load_snapshot())

    def enroll_from_waitlist(self, notification_id: str) -> None:
        """Enroll the waitlisted person a notification offers a slot to.

        Raises:
            InvalidNotificationIdError: If the notification_id is not a valid UUID.
            NotificationNotFoundError: If the notification does not exist.
            StaleNotificationError: If the notification cannot be acted on.
            SessionNotFoundError: If the session was deleted after the check.
        """
        notification_id = _notification_id(notification_id)
        snapshot = self._store.load_snapshot()
        notification = snapshot.notification(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)

        resolved = resolve_notification(notification, snapshot)
        if resolved is None or resolved.enroll is None:
            logger.warning("Refused enrollment from stale notification %s", notification_id)
            raise StaleNotificationError(notification_id)

        command = resolved.enroll
        if not self._store.enroll_from_waitlist(
            command.notification_id, command.session_id, command.person_id
        ):
            raise NotificationNotFoundError(notification_id)
        logger.info(
            "Enrolled person %s in session %s from waitlist",
            command.person_id,
            command.session_id,
        )

    def dismiss_notification(self, notification_id: str) -> None:
        """Dismiss a notification, stale or not.

        Raises:
            InvalidNotificationIdError: If the notification_id is not a valid UUID.
            NotificationNotFoundError: If the notification does not exist.
        """
        notification_id = _notification_id(notification_id)
        if not self._store.dismiss_notification(notification_id):
            raise NotificationNotFoundError(notification_id)
        logger.info("Dismissed notification %s", notification_id)

    def record_attendance(
        self,
        session_id: str,
        day: str | date,
        changes: AttendanceChanges,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        """Record the roll call for one occurrence of a session.

        The attendance window is checked again here; the flag returned with
        the session list is only advisory. A person is marked present, absent
        or justified at most once; absences are for regulars of the session
        and one-time attendees are not regulars.

        Raises:
            InvalidSessionIdError: If the session_id is not a valid UUID.
            SessionNotFoundError: If the session does not exist.
            InvalidDateError: If `day` is not an ISO date.
            SessionNotHeldError: If `day` is not the session's weekday.
            InvalidPersonIdError: If any person id is not a valid UUID.
            PersonNotFoundError: If any person does not exist.
            InvalidRollCallError: If the roll call contradicts the enrollment.
            AttendanceWindowClosedError: If the window has not opened yet.
        """
        now = self._now(now)
        snapshot = self._store.load_snapshot()
        session = self._get_session(snapshot, session_id)
        occurrence = self._day(day, now)
        if weekday_name(occurrence) != session.day_of_week:
            raise SessionNotHeldError(session.id, occurrence)

        changes = _canonical_changes(changes)
        for person_id in sorted(changes.person_ids()):
            if snapshot.person(person_id) is None:
                raise PersonNotFoundError(person_id)
        _check_roll_call(session, changes)

        if not attendance_allowed(occurrence, session.time, now, self._window):
            logger.warning(
                "Refused attendance for session %s on %s before window opened",
                session.id,
                occurrence,
            )
            raise AttendanceWindowClosedError(session.id, occurrence)

        record = self._store.record_attendance(session.id, occurrence, changes)
        logger.info("Recorded attendance for session %s on %s", session.id, occurrence)
        return record

    def _now(self, now: datetime | None) -> datetime:
        now = now or self._clock()
        return timezone.localtime(now) if timezone.is_aware(now) else now

    @staticmethod
    def _day(day: str | date | None, now: datetime) -> date:
        if day is None or day == "":
            return now.date()
        if isinstance(day, date):
            return day
        try:
            return date.fromisoformat(day)
        except ValueError:
            raise InvalidDateError()

    @staticmethod
    def _get_session(snapshot: StudioSnapshot, session_id: str):
        try:
            session_id = SessionId.from_string(session_id).value
        except (AttributeError, TypeError, ValueError):
            raise InvalidSessionIdError()
        session = snapshot.session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session


def _restriction(value: str | None) -> str | None:
    return None if value is None or value in NO_RESTRICTION else value


def _time_of_day(value: str | None) -> TimeOfDay | None:
    if _restriction(value) is None:
        return None
    try:
        return TimeOfDay(value)
    except ValueError:
        raise InvalidFilterError("time_of_day")


def _notification_id(value: str) -> str:
    try:
        return NotificationId.from_string(value).value
    except (AttributeError, TypeError, ValueError):
        raise InvalidNotificationIdError()


def _person_ids(values) -> tuple[str, ...]:
    try:
        return tuple(dict.fromkeys(PersonId.from_string(v).value for v in values))
    except (AttributeError, TypeError, ValueError):
        raise InvalidPersonIdError()


def _canonical_changes(changes: AttendanceChanges) -> AttendanceChanges:
    return AttendanceChanges(
        present_ids=_person_ids(changes.present_ids),
        absent_ids=_person_ids(changes.absent_ids),
        justified_absence_ids=_person_ids(changes.justified_absence_ids),
        one_time_attendees=_person_ids(changes.one_time_attendees),
    )


def _check_roll_call(session: Session, changes: AttendanceChanges) -> None:
    marked = (changes.present_ids, changes.absent_ids, changes.justified_absence_ids)
    seen: set[str] = set()
    for person_id in (pid for ids in marked for pid in ids):
        if person_id in seen:
            raise InvalidRollCallError(
                "Person marked more than once in the roll call", (person_id,)
            )
        seen.add(person_id)

    regulars = set(session.person_ids)
    not_enrolled = tuple(
        pid
        for pid in (*changes.absent_ids, *changes.justified_absence_ids)
        if pid not in regulars
    )
    if not_enrolled:
        raise InvalidRollCallError(
            "Absences can only be recorded for enrolled people", not_enrolled
        )

    enrolled = tuple(pid for pid in changes.one_time_attendees if pid in regulars)
    if enrolled:
        raise InvalidRollCallError(
            "One-time attendees cannot be enrolled in the session", enrolled
        )
