"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from studio.cache import NOTIFICATIONS_KEY, SUMMARY_KEY
from studio.domain.errors import DomainError, ErrorCode
from studio.handlers.serializers import (
    AttendanceInputSerializer,
    AttendanceRecordSerializer,
    DashboardSummarySerializer,
    NotificationSerializer,
    SessionOccupancySerializer,
    SessionRosterSerializer,
)
from studio.services import DashboardService
from studio.stores import DjangoStudioStore

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOTIFICATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PERSON_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_SESSION_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_NOTIFICATION_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PERSON_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILTER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_HELD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ROLL_CALL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.STALE_NOTIFICATION: status.HTTP_409_CONFLICT,
    ErrorCode.ATTENDANCE_WINDOW_CLOSED: status.HTTP_409_CONFLICT,
}


def _service() -> DashboardService:
    return DashboardService(DjangoStudioStore())


def _error_response(error: DomainError) -> Response:
    logger.debug("Request refused: %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def _cached(key: str, build) -> object:
    data = cache.get(key)
    if data is None:
        data = build()
        cache.set(key, data, settings.STUDIO_DASHBOARD_CACHE_TIMEOUT)
    return data


class DashboardSummaryView(APIView):
    """Handler for GET /api/dashboard"""

    def get(self, request: Request) -> Response:
        data = _cached(
            SUMMARY_KEY,
            lambda: dict(DashboardSummarySerializer(_service().summary()).data),
        )
        return Response(data)


class SessionListView(APIView):
    """Handler for GET /api/dashboard/sessions"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        try:
            sessions = _service().sessions_for_day(
                day=params.get("date"),
                activity_id=params.get("activity"),
                space_id=params.get("space"),
                specialist_id=params.get("specialist"),
                time_of_day=params.get("time_of_day"),
            )
        except DomainError as error:
            return _error_response(error)
        return Response(SessionOccupancySerializer(sessions, many=True).data)


class SessionRosterView(APIView):
    """Handler for GET /api/sessions/{session_id}/roster"""

    def get(self, request: Request, session_id: str) -> Response:
        try:
            roster = _service().session_roster(
                session_id, day=request.query_params.get("date")
            )
        except DomainError as error:
            return _error_response(error)
        return Response(SessionRosterSerializer(roster).data)


class AttendanceView(APIView):
    """Handler for POST /api/sessions/{session_id}/attendance"""

    def post(self, request: Request, session_id: str) -> Response:
        serializer = AttendanceInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            record = _service().record_attendance(
                session_id,
                serializer.validated_data["date"],
                serializer.to_changes(),
            )
        except DomainError as error:
            return _error_response(error)
        return Response(AttendanceRecordSerializer(record).data)


class NotificationListView(APIView):
    """Handler for GET /api/notifications"""

    def get(self, request: Request) -> Response:
        data = _cached(
            NOTIFICATIONS_KEY,
            lambda: list(
                NotificationSerializer(_service().notifications(), many=True).data
            ),
        )
        return Response(data)


class NotificationEnrollView(APIView):
    """Handler for POST /api/notifications/{notification_id}/enroll"""

    def post(self, request: Request, notification_id: str) -> Response:
        try:
            _service().enroll_from_waitlist(notification_id)
        except DomainError as error:
            return _error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class NotificationDismissView(APIView):
    """Handler for POST /api/notifications/{notification_id}/dismiss"""

    def post(self, request: Request, notification_id: str) -> Response:
        try:
            _service().dismiss_notification(notification_id)
        except DomainError as error:
            return _error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)
