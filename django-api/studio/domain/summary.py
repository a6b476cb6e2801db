"""Dashboard card counts."""

from dataclasses import dataclass
from datetime import date, datetime

from studio.domain.models import StudioSnapshot
from studio.domain.people import PaymentStatus, is_on_vacation, payment_status
from studio.domain.recovery import pending_recovery_count


@dataclass(frozen=True)
class DashboardSummary:
    sessions: int
    active_people: int
    specialists: int
    activities: int
    spaces: int
    levels: int
    overdue: int
    on_vacation: int
    pending_recovery: int


def dashboard_summary(snapshot: StudioSnapshot, now: datetime | date) -> DashboardSummary:
    active = snapshot.active_people
    return DashboardSummary(
        sessions=len(snapshot.sessions),
        active_people=len(active),
        specialists=len(snapshot.specialists),
        activities=len(snapshot.activities),
        spaces=len(snapshot.spaces),
        levels=len(snapshot.levels),
        overdue=sum(1 for p in active if payment_status(p, now) is PaymentStatus.OVERDUE),
        on_vacation=sum(1 for p in active if is_on_vacation(p, now)),
        pending_recovery=pending_recovery_count(snapshot),
    )
