"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=str(UUID(value)))


@dataclass(frozen=True)
class PersonId:
    """Unique identifier for a Person."""

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=str(UUID(value)))


@dataclass(frozen=True)
class NotificationId:
    """Unique identifier for a Notification."""

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=str(UUID(value)))


@dataclass(frozen=True)
class ClockTime:
    """Wall-clock time of a weekly session, stored as zero-padded "HH:MM"."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ValueError("Clock time out of range")

    @classmethod
    def from_string(cls, value: str) -> Self:
        hour, sep, minute = value.strip().partition(":")
        if not sep or not hour.isdigit() or not minute.isdigit():
            raise ValueError(f"Invalid clock time: {value!r}")
        return cls(hour=int(hour), minute=int(minute))

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Like from_string, but returns None for missing or malformed input."""
        if not value:
            return None
        try:
            return cls.from_string(value)
        except ValueError:
            return None

    def on(self, day: date, tzinfo=None) -> datetime:
        return datetime.combine(day, time(self.hour, self.minute), tzinfo=tzinfo)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class DateRange:
    """Calendar date range with inclusive bounds."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end
