from django.urls import path

from studio.handlers import (
    AttendanceView,
    DashboardSummaryView,
    NotificationDismissView,
    NotificationEnrollView,
    NotificationListView,
    SessionListView,
    SessionRosterView,
)

urlpatterns = [
    path("dashboard", DashboardSummaryView.as_view(), name="dashboard-summary"),
    path("dashboard/sessions", SessionListView.as_view(), name="dashboard-sessions"),
    path(
        "sessions/<str:session_id>/roster",
        SessionRosterView.as_view(),
        name="session-roster",
    ),
    path(
        "sessions/<str:session_id>/attendance",
        AttendanceView.as_view(),
        name="session-attendance",
    ),
    path("notifications", NotificationListView.as_view(), name="notification-list"),
    path(
        "notifications/<str:notification_id>/enroll",
        NotificationEnrollView.as_view(),
        name="notification-enroll",
    ),
    path(
        "notifications/<str:notification_id>/dismiss",
        NotificationDismissView.as_view(),
        name="notification-dismiss",
    ),
]
