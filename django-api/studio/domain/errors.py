"""Domain error codes for the studio module."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    NOTIFICATION_NOT_FOUND = "NOTIFICATION_NOT_FOUND"
    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    INVALID_NOTIFICATION_ID = "INVALID_NOTIFICATION_ID"
    INVALID_PERSON_ID = "INVALID_PERSON_ID"
    PERSON_NOT_FOUND = "PERSON_NOT_FOUND"
    INVALID_DATE = "INVALID_DATE"
    INVALID_FILTER = "INVALID_FILTER"
    STALE_NOTIFICATION = "STALE_NOTIFICATION"
    ATTENDANCE_WINDOW_CLOSED = "ATTENDANCE_WINDOW_CLOSED"
    SESSION_NOT_HELD = "SESSION_NOT_HELD"
    INVALID_ROLL_CALL = "INVALID_ROLL_CALL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class SessionNotFoundError(DomainError):
    """Raised when a session does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        object.__setattr__(self, "session_id", session_id)


class NotificationNotFoundError(DomainError):
    """Raised when a notification does not exist (or was already dismissed)."""

    def __init__(self, notification_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOTIFICATION_NOT_FOUND,
            message="Notification not found",
        )
        object.__setattr__(self, "notification_id", notification_id)


class InvalidSessionIdError(DomainError):
    """Raised when a session ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_ID,
            message="Invalid session ID format",
        )


class InvalidNotificationIdError(DomainError):
    """Raised when a notification ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_NOTIFICATION_ID,
            message="Invalid notification ID format",
        )


class InvalidPersonIdError(DomainError):
    """Raised when a person ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PERSON_ID,
            message="Invalid person ID format",
        )


class PersonNotFoundError(DomainError):
    """Raised when a person does not exist."""

    def __init__(self, person_id: str) -> None:
        super().__init__(
            code=ErrorCode.PERSON_NOT_FOUND,
            message="Person not found",
        )
        object.__setattr__(self, "person_id", person_id)


class InvalidDateError(DomainError):
    """Raised when a date is not in YYYY-MM-DD format."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date, expected YYYY-MM-DD",
        )


class InvalidFilterError(DomainError):
    """Raised when a session list filter has an unknown value."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FILTER,
            message=f"Invalid value for filter '{name}'",
        )


class StaleNotificationError(DomainError):
    """Raised when acting on a notification whose references no longer resolve."""

    def __init__(self, notification_id: str) -> None:
        super().__init__(
            code=ErrorCode.STALE_NOTIFICATION,
            message="Notification is no longer valid",
        )
        object.__setattr__(self, "notification_id", notification_id)


class AttendanceWindowClosedError(DomainError):
    """Raised when attendance is recorded before the session's window opens."""

    def __init__(self, session_id: str, day: date) -> None:
        super().__init__(
            code=ErrorCode.ATTENDANCE_WINDOW_CLOSED,
            message="Attendance is not open yet for this session",
        )
        object.__setattr__(self, "session_id", session_id)
        object.__setattr__(self, "day", day)


class SessionNotHeldError(DomainError):
    """Raised when a date does not fall on the session's weekday."""

    def __init__(self, session_id: str, day: date) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_HELD,
            message="Session is not held on this date",
        )
        object.__setattr__(self, "session_id", session_id)
        object.__setattr__(self, "day", day)


class InvalidRollCallError(DomainError):
    """Raised when a roll call contradicts the session's enrollment."""

    def __init__(self, reason: str, person_ids: tuple[str, ...]) -> None:
        super().__init__(code=ErrorCode.INVALID_ROLL_CALL, message=reason)
        object.__setattr__(self, "person_ids", person_ids)
