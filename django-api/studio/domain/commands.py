"""Mutation requests the engine hands to the store. The engine never applies them."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnrollFromWaitlist:
    notification_id: str
    session_id: str
    person_id: str


@dataclass(frozen=True)
class DismissNotification:
    notification_id: str


@dataclass(frozen=True)
class AttendanceChanges:
    """Roll call for one occurrence. Replaces whatever was recorded before."""

    present_ids: tuple[str, ...] = ()
    absent_ids: tuple[str, ...] = ()
    justified_absence_ids: tuple[str, ...] = ()
    one_time_attendees: tuple[str, ...] = ()

    def person_ids(self) -> set[str]:
        return {
            *self.present_ids,
            *self.absent_ids,
            *self.justified_absence_ids,
            *self.one_time_attendees,
        }
