"""Store interfaces (repository pattern).

Stores must be swappable. They produce immutable snapshots for the engine
and apply the commands it emits.
"""

from abc import ABC, abstractmethod
from datetime import date

from studio.domain import AttendanceChanges, AttendanceRecord, StudioSnapshot


class StudioStore(ABC):
    """Interface for studio persistence operations."""

    @abstractmethod
    def load_snapshot(self) -> StudioSnapshot:
        """Return every studio entity as an immutable snapshot."""
        ...

    @abstractmethod
    def enroll_from_waitlist(
        self, notification_id: str, session_id: str, person_id: str
    ) -> bool:
        """Add the person to the session's regulars and remove the notification.

        Return False if the notification no longer exists. Raise
        SessionNotFoundError, leaving the notification in place, if the
        session no longer exists.
        """
        ...

    @abstractmethod
    def dismiss_notification(self, notification_id: str) -> bool:
        """Remove a notification. Return False if it did not exist."""
        ...

    @abstractmethod
    def record_attendance(
        self, session_id: str, day: date, changes: AttendanceChanges
    ) -> AttendanceRecord:
        """Create or replace the attendance record for (session, day)."""
        ...
