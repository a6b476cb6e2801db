"""Per-person derived facts: payment status and vacation status."""

from datetime import date, datetime
from enum import Enum

from studio.domain.models import Person


class PaymentStatus(Enum):
    CURRENT = "current"
    OVERDUE = "overdue"
    UNKNOWN = "unknown"


def _as_date(moment: datetime | date) -> date:
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def payment_status(person: Person, now: datetime | date) -> PaymentStatus:
    """Return the person's payment status relative to `now`.

    A person without a due date has no billing data and is UNKNOWN. The due
    date itself is still CURRENT; the person becomes OVERDUE the day after.
    """
    if person.payment_due_date is None:
        return PaymentStatus.UNKNOWN
    if _as_date(now) > person.payment_due_date:
        return PaymentStatus.OVERDUE
    return PaymentStatus.CURRENT


def is_on_vacation(person: Person, now: datetime | date) -> bool:
    """True iff `now` falls inside one of the person's vacation ranges."""
    today = _as_date(now)
    return any(today in period for period in person.vacations)
