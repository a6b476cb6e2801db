"""Resolution of dashboard notifications against the current snapshot.

Notifications reference sessions and people that may have been deleted or
deactivated since they were raised. Waitlist notifications in that state
are shown as stale and can only be dismissed; churn-risk notifications and
unknown kinds are dropped.
"""

from dataclasses import dataclass
from datetime import datetime

from studio.domain.commands import DismissNotification, EnrollFromWaitlist
from studio.domain.models import Notification, NotificationType, StudioSnapshot


@dataclass(frozen=True)
class ResolvedNotification:
    id: str
    type: NotificationType
    created_at: datetime
    is_stale: bool
    dismiss: DismissNotification
    enroll: EnrollFromWaitlist | None = None
    person_name: str | None = None
    activity_name: str | None = None
    day_of_week: str | None = None
    time: str | None = None


def _resolve_waitlist(
    notification: Notification, snapshot: StudioSnapshot
) -> ResolvedNotification:
    dismiss = DismissNotification(notification.id)
    session = snapshot.session(notification.session_id)
    person = snapshot.person(notification.person_id)
    activity = snapshot.activity(session.activity_id) if session else None

    if not (session and person and activity) or not person.is_active:
        return ResolvedNotification(
            id=notification.id,
            type=NotificationType.WAITLIST,
            created_at=notification.created_at,
            is_stale=True,
            dismiss=dismiss,
        )
    return ResolvedNotification(
        id=notification.id,
        type=NotificationType.WAITLIST,
        created_at=notification.created_at,
        is_stale=False,
        dismiss=dismiss,
        enroll=EnrollFromWaitlist(notification.id, session.id, person.id),
        person_name=person.name,
        activity_name=activity.name,
        day_of_week=session.day_of_week,
        time=session.time,
    )


def _resolve_churn_risk(
    notification: Notification, snapshot: StudioSnapshot
) -> ResolvedNotification | None:
    person = snapshot.person(notification.person_id)
    if person is None or not person.is_active:
        return None
    return ResolvedNotification(
        id=notification.id,
        type=NotificationType.CHURN_RISK,
        created_at=notification.created_at,
        is_stale=False,
        dismiss=DismissNotification(notification.id),
        person_name=person.name,
    )


def resolve_notification(
    notification: Notification, snapshot: StudioSnapshot
) -> ResolvedNotification | None:
    """Resolve one notification, or None when it must not be displayed."""
    if notification.type == NotificationType.WAITLIST.value:
        return _resolve_waitlist(notification, snapshot)
    if notification.type == NotificationType.CHURN_RISK.value:
        return _resolve_churn_risk(notification, snapshot)
    return None


def resolve_notifications(snapshot: StudioSnapshot) -> list[ResolvedNotification]:
    """Return the displayable notifications, newest first."""
    ordered = sorted(snapshot.notifications, key=lambda n: n.created_at, reverse=True)
    resolved = (resolve_notification(n, snapshot) for n in ordered)
    return [n for n in resolved if n is not None]
