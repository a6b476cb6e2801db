from studio.handlers.views import (
    AttendanceView,
    DashboardSummaryView,
    NotificationDismissView,
    NotificationEnrollView,
    NotificationListView,
    SessionListView,
    SessionRosterView,
)

__all__ = [
    "AttendanceView",
    "DashboardSummaryView",
    "NotificationDismissView",
    "NotificationEnrollView",
    "NotificationListView",
    "SessionListView",
    "SessionRosterView",
]
