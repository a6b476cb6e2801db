"""Per-day session listing: enrollment, occupancy, filters and attendance gate.

Sessions recur weekly and are keyed by the localized day name stored on
them, so the weekday table below is part of the data contract.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from studio.domain.models import Session, SessionType, StudioSnapshot
from studio.domain.people import is_on_vacation
from studio.domain.value_objects import ClockTime

# 0=Sunday .. 6=Saturday
WEEKDAY_NAMES: dict[int, str] = {
    0: "Domingo",
    1: "Lunes",
    2: "Martes",
    3: "Miércoles",
    4: "Jueves",
    5: "Viernes",
    6: "Sábado",
}

ATTENDANCE_WINDOW = timedelta(minutes=20)
NEARLY_FULL_THRESHOLD = 0.8
PLACEHOLDER = "N/A"


class TimeOfDay(Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


def weekday_name(day: date) -> str:
    return WEEKDAY_NAMES[day.isoweekday() % 7]


def time_of_day(value: str | None) -> TimeOfDay:
    """Bucket a session time. Missing or malformed times count as afternoon."""
    clock = ClockTime.parse(value)
    if clock is None:
        return TimeOfDay.AFTERNOON
    if clock.hour < 12:
        return TimeOfDay.MORNING
    if clock.hour < 18:
        return TimeOfDay.AFTERNOON
    return TimeOfDay.EVENING


def display_time(value: str | None) -> str:
    clock = ClockTime.parse(value)
    return str(clock) if clock else PLACEHOLDER


def _start_key(value: str | None) -> str:
    # "9:00" sorts as "09:00"; malformed times keep their raw text
    clock = ClockTime.parse(value)
    return str(clock) if clock else value or ""


def attendance_allowed(
    day: date,
    session_time: str | None,
    now: datetime,
    window: timedelta = ATTENDANCE_WINDOW,
) -> bool:
    """Whether roll call may be taken for the occurrence on `day`.

    Opens `window` before the session starts and stays open afterwards.
    A malformed session time keeps the gate closed.
    """
    clock = ClockTime.parse(session_time)
    if clock is None:
        return False
    window_start = clock.on(day, tzinfo=now.tzinfo) - window
    return now >= window_start


def session_capacity(session: Session, snapshot: StudioSnapshot) -> int:
    if session.session_type is SessionType.INDIVIDUAL:
        return 1
    space = snapshot.space(session.space_id)
    return space.capacity if space else 0


def enrolled_person_ids(
    session: Session, day: date, snapshot: StudioSnapshot
) -> tuple[str, ...]:
    """Active regulars not on vacation plus active one-time attendees, deduplicated."""
    record = snapshot.attendance_for(session.id, day)
    one_time = record.one_time_attendees if record else ()

    enrolled: dict[str, None] = {}
    for person_id in session.person_ids:
        person = snapshot.person(person_id)
        if person and person.is_active and not is_on_vacation(person, day):
            enrolled[person_id] = None
    for person_id in one_time:
        person = snapshot.person(person_id)
        if person and person.is_active:
            enrolled[person_id] = None
    return tuple(enrolled)


@dataclass(frozen=True)
class SessionOccupancy:
    """One session occurrence on a given day with its derived occupancy."""

    session_id: str
    day: date
    day_of_week: str
    time: str
    display_time: str
    time_of_day: TimeOfDay
    session_type: SessionType
    activity_id: str | None
    specialist_id: str | None
    space_id: str | None
    activity_name: str
    specialist_name: str
    space_name: str
    enrolled_ids: tuple[str, ...]
    capacity: int
    attendance_allowed: bool
    nearly_full_threshold: float = NEARLY_FULL_THRESHOLD

    @property
    def enrolled_count(self) -> int:
        return len(self.enrolled_ids)

    @property
    def utilization(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.enrolled_count / self.capacity

    @property
    def is_full(self) -> bool:
        return self.utilization >= 1.0

    @property
    def is_nearly_full(self) -> bool:
        return self.nearly_full_threshold <= self.utilization < 1.0


def session_occupancy(
    session: Session,
    day: date,
    snapshot: StudioSnapshot,
    now: datetime,
    window: timedelta = ATTENDANCE_WINDOW,
    nearly_full_threshold: float = NEARLY_FULL_THRESHOLD,
) -> SessionOccupancy:
    activity = snapshot.activity(session.activity_id)
    specialist = snapshot.specialist(session.specialist_id)
    space = snapshot.space(session.space_id)
    return SessionOccupancy(
        session_id=session.id,
        day=day,
        day_of_week=session.day_of_week,
        time=session.time,
        display_time=display_time(session.time),
        time_of_day=time_of_day(session.time),
        session_type=session.session_type,
        activity_id=session.activity_id,
        specialist_id=session.specialist_id,
        space_id=session.space_id,
        activity_name=activity.name if activity else PLACEHOLDER,
        specialist_name=specialist.name if specialist else PLACEHOLDER,
        space_name=space.name if space else PLACEHOLDER,
        enrolled_ids=enrolled_person_ids(session, day, snapshot),
        capacity=session_capacity(session, snapshot),
        attendance_allowed=attendance_allowed(day, session.time, now, window),
        nearly_full_threshold=nearly_full_threshold,
    )


@dataclass(frozen=True)
class SessionFilters:
    """Equality filters for the session list. None means no restriction."""

    activity_id: str | None = None
    space_id: str | None = None
    specialist_id: str | None = None
    time_of_day: TimeOfDay | None = None

    def matches(self, entry: SessionOccupancy) -> bool:
        return (
            (self.activity_id is None or entry.activity_id == self.activity_id)
            and (self.space_id is None or entry.space_id == self.space_id)
            and (self.specialist_id is None or entry.specialist_id == self.specialist_id)
            and (self.time_of_day is None or entry.time_of_day is self.time_of_day)
        )


def sessions_for_day(
    snapshot: StudioSnapshot,
    day: date,
    now: datetime,
    filters: SessionFilters = SessionFilters(),
    window: timedelta = ATTENDANCE_WINDOW,
    nearly_full_threshold: float = NEARLY_FULL_THRESHOLD,
) -> list[SessionOccupancy]:
    """Return the sessions held on `day`, filtered and sorted by start time."""
    name = weekday_name(day)
    entries = [
        session_occupancy(session, day, snapshot, now, window, nearly_full_threshold)
        for session in snapshot.sessions
        if session.day_of_week == name
    ]
    entries.sort(key=lambda entry: _start_key(entry.time))
    return [entry for entry in entries if filters.matches(entry)]


@dataclass(frozen=True)
class RosterEntry:
    person_id: str
    name: str
    phone: str
    whatsapp_link: str | None
    is_one_time: bool


@dataclass(frozen=True)
class SessionRoster:
    occupancy: SessionOccupancy
    people: tuple[RosterEntry, ...]


def whatsapp_link(phone: str) -> str | None:
    digits = re.sub(r"\D", "", phone or "")
    return f"https://wa.me/{digits}" if digits else None


def session_roster(
    session: Session,
    day: date,
    snapshot: StudioSnapshot,
    now: datetime,
    window: timedelta = ATTENDANCE_WINDOW,
    nearly_full_threshold: float = NEARLY_FULL_THRESHOLD,
) -> SessionRoster:
    """People enrolled in one occurrence, sorted by name."""
    occupancy = session_occupancy(
        session, day, snapshot, now, window, nearly_full_threshold
    )
    regulars = set(session.person_ids)
    people = [snapshot.person(person_id) for person_id in occupancy.enrolled_ids]
    entries = [
        RosterEntry(
            person_id=person.id,
            name=person.name,
            phone=person.phone,
            whatsapp_link=whatsapp_link(person.phone),
            is_one_time=person.id not in regulars,
        )
        for person in sorted(people, key=lambda p: p.name.casefold())
    ]
    return SessionRoster(occupancy=occupancy, people=tuple(entries))
