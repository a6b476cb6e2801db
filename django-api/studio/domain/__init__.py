from studio.domain.commands import (
    AttendanceChanges,
    DismissNotification,
    EnrollFromWaitlist,
)
from studio.domain.models import (
    Activity,
    AttendanceRecord,
    Level,
    Notification,
    NotificationType,
    Person,
    PersonStatus,
    Session,
    SessionType,
    Space,
    Specialist,
    StudioSnapshot,
)
from studio.domain.value_objects import (
    ClockTime,
    DateRange,
    NotificationId,
    PersonId,
    SessionId,
)

__all__ = [
    "Activity",
    "AttendanceChanges",
    "AttendanceRecord",
    "ClockTime",
    "DateRange",
    "DismissNotification",
    "EnrollFromWaitlist",
    "Level",
    "Notification",
    "NotificationId",
    "NotificationType",
    "Person",
    "PersonId",
    "PersonStatus",
    "Session",
    "SessionId",
    "SessionType",
    "Space",
    "Specialist",
    "StudioSnapshot",
]
