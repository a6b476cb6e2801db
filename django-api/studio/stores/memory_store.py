"""In-memory implementation of the StudioStore, used by tests and fixtures."""

import logging
from dataclasses import replace
from datetime import date

from studio.domain import AttendanceChanges, AttendanceRecord, StudioSnapshot
from studio.domain.errors import SessionNotFoundError
from studio.stores.interfaces import StudioStore

logger = logging.getLogger(__name__)


class InMemoryStudioStore(StudioStore):
    """Keeps the current snapshot in memory and replaces it on every command."""

    def __init__(self, snapshot: StudioSnapshot | None = None) -> None:
        self._snapshot = snapshot or StudioSnapshot()

    def load_snapshot(self) -> StudioSnapshot:
        return self._snapshot

    def enroll_from_waitlist(
        self, notification_id: str, session_id: str, person_id: str
    ) -> bool:
        if self._snapshot.notification(notification_id) is None:
            return False
        if self._snapshot.session(session_id) is None:
            raise SessionNotFoundError(session_id)
        sessions = tuple(
            replace(s, person_ids=(*s.person_ids, person_id))
            if s.id == session_id and person_id not in s.person_ids
            else s
            for s in self._snapshot.sessions
        )
        self._snapshot = replace(
            self._snapshot,
            sessions=sessions,
            notifications=self._without_notification(notification_id),
        )
        logger.debug("Enrolled %s in %s from waitlist", person_id, session_id)
        return True

    def dismiss_notification(self, notification_id: str) -> bool:
        if self._snapshot.notification(notification_id) is None:
            return False
        self._snapshot = replace(
            self._snapshot, notifications=self._without_notification(notification_id)
        )
        logger.debug("Dismissed notification %s", notification_id)
        return True

    def record_attendance(
        self, session_id: str, day: date, changes: AttendanceChanges
    ) -> AttendanceRecord:
        record = AttendanceRecord(
            session_id=session_id,
            date=day,
            present_ids=changes.present_ids,
            absent_ids=changes.absent_ids,
            justified_absence_ids=changes.justified_absence_ids,
            one_time_attendees=changes.one_time_attendees,
        )
        attendance = tuple(
            r
            for r in self._snapshot.attendance
            if (r.session_id, r.date) != (session_id, day)
        )
        self._snapshot = replace(self._snapshot, attendance=(*attendance, record))
        logger.debug("Recorded attendance for %s on %s", session_id, day)
        return record

    def _without_notification(self, notification_id: str) -> tuple:
        return tuple(n for n in self._snapshot.notifications if n.id != notification_id)
