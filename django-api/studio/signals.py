"""Django signals for cache invalidation.

Any change to studio state makes the cached dashboard summary and
notification list stale, so both are dropped and recomputed on next read.
"""

from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from studio.cache import invalidate_dashboard
from studio.models import (
    Activity,
    AttendanceRecord,
    Level,
    Notification,
    Person,
    Session,
    Space,
    Specialist,
    VacationPeriod,
)

STUDIO_MODELS = [
    Activity,
    AttendanceRecord,
    Level,
    Notification,
    Person,
    Session,
    Space,
    Specialist,
    VacationPeriod,
]

ROSTER_RELATIONS = [
    Session.people.through,
    AttendanceRecord.present.through,
    AttendanceRecord.absent.through,
    AttendanceRecord.justified_absences.through,
    AttendanceRecord.one_time_attendees.through,
]


@receiver([post_save, post_delete])
def invalidate_on_change(sender, instance, **kwargs):
    """Invalidate caches when a studio model is saved or deleted."""
    if sender in STUDIO_MODELS:
        invalidate_dashboard()


@receiver(m2m_changed)
def invalidate_on_roster_change(sender, instance, action, **kwargs):
    """Invalidate caches when enrollment or attendance membership changes."""
    if sender in ROSTER_RELATIONS and action.startswith("post_"):
        invalidate_dashboard()
