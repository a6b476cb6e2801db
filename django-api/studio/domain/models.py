"""Domain models representing a read-only snapshot of studio state.

These are pure domain objects with no persistence concerns.
Django ORM models are in studio/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from functools import cached_property

from studio.domain.value_objects import DateRange


class PersonStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class SessionType(Enum):
    INDIVIDUAL = "Individual"
    GROUP = "Group"


class NotificationType(Enum):
    WAITLIST = "waitlist"
    CHURN_RISK = "churnRisk"


@dataclass(frozen=True)
class Activity:
    """Domain representation of an Activity (what is taught in a session)."""

    id: str
    name: str


@dataclass(frozen=True)
class Specialist:
    """Domain representation of a Specialist (the instructor of a session)."""

    id: str
    name: str
    phone: str = ""


@dataclass(frozen=True)
class Space:
    """Domain representation of a Space (room) with its capacity."""

    id: str
    name: str
    capacity: int


@dataclass(frozen=True)
class Level:
    id: str
    name: str


@dataclass(frozen=True)
class Person:
    """Domain representation of a Person (student)."""

    id: str
    name: str
    status: PersonStatus = PersonStatus.ACTIVE
    phone: str = ""
    payment_due_date: date | None = None
    vacations: tuple[DateRange, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.status is PersonStatus.ACTIVE


@dataclass(frozen=True)
class Session:
    """Domain representation of a weekly Session."""

    id: str
    day_of_week: str
    time: str
    session_type: SessionType = SessionType.GROUP
    activity_id: str | None = None
    specialist_id: str | None = None
    space_id: str | None = None
    level_id: str | None = None
    person_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class AttendanceRecord:
    """Attendance for one occurrence of a session (session, date)."""

    session_id: str
    date: date
    present_ids: tuple[str, ...] = ()
    absent_ids: tuple[str, ...] = ()
    justified_absence_ids: tuple[str, ...] = ()
    one_time_attendees: tuple[str, ...] = ()


@dataclass(frozen=True)
class Notification:
    """Dashboard alert. `type` is kept as the raw string so unknown kinds survive."""

    id: str
    type: str
    created_at: datetime
    session_id: str | None = None
    person_id: str | None = None


@dataclass(frozen=True)
class StudioSnapshot:
    """Immutable view of all studio entities at one point in time."""

    people: tuple[Person, ...] = ()
    sessions: tuple[Session, ...] = ()
    attendance: tuple[AttendanceRecord, ...] = ()
    notifications: tuple[Notification, ...] = ()
    activities: tuple[Activity, ...] = ()
    specialists: tuple[Specialist, ...] = ()
    spaces: tuple[Space, ...] = ()
    levels: tuple[Level, ...] = ()

    @cached_property
    def _people_by_id(self) -> dict[str, Person]:
        return {p.id: p for p in self.people}

    @cached_property
    def _sessions_by_id(self) -> dict[str, Session]:
        return {s.id: s for s in self.sessions}

    @cached_property
    def _activities_by_id(self) -> dict[str, Activity]:
        return {a.id: a for a in self.activities}

    @cached_property
    def _specialists_by_id(self) -> dict[str, Specialist]:
        return {s.id: s for s in self.specialists}

    @cached_property
    def _spaces_by_id(self) -> dict[str, Space]:
        return {s.id: s for s in self.spaces}

    @cached_property
    def _attendance_by_key(self) -> dict[tuple[str, date], AttendanceRecord]:
        return {(r.session_id, r.date): r for r in self.attendance}

    @cached_property
    def _notifications_by_id(self) -> dict[str, Notification]:
        return {n.id: n for n in self.notifications}

    def person(self, person_id: str | None) -> Person | None:
        return self._people_by_id.get(person_id)

    def session(self, session_id: str | None) -> Session | None:
        return self._sessions_by_id.get(session_id)

    def activity(self, activity_id: str | None) -> Activity | None:
        return self._activities_by_id.get(activity_id)

    def specialist(self, specialist_id: str | None) -> Specialist | None:
        return self._specialists_by_id.get(specialist_id)

    def space(self, space_id: str | None) -> Space | None:
        return self._spaces_by_id.get(space_id)

    def notification(self, notification_id: str | None) -> Notification | None:
        return self._notifications_by_id.get(notification_id)

    def attendance_for(self, session_id: str, day: date) -> AttendanceRecord | None:
        return self._attendance_by_key.get((session_id, day))

    @property
    def active_people(self) -> tuple[Person, ...]:
        return tuple(p for p in self.people if p.is_active)
