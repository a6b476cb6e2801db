"""Serializers for transforming domain values to API responses and parsing input."""

from rest_framework import serializers

from studio.domain import AttendanceChanges


class DashboardSummarySerializer(serializers.Serializer):
    sessions = serializers.IntegerField()
    active_people = serializers.IntegerField()
    specialists = serializers.IntegerField()
    activities = serializers.IntegerField()
    spaces = serializers.IntegerField()
    levels = serializers.IntegerField()
    overdue = serializers.IntegerField()
    on_vacation = serializers.IntegerField()
    pending_recovery = serializers.IntegerField()


class SessionOccupancySerializer(serializers.Serializer):
    """Serializer for a session occurrence with derived occupancy."""

    session_id = serializers.CharField()
    date = serializers.DateField(source="day")
    day_of_week = serializers.CharField()
    time = serializers.CharField(source="display_time")
    time_of_day = serializers.CharField(source="time_of_day.value")
    session_type = serializers.CharField(source="session_type.value")
    activity_id = serializers.CharField(allow_null=True)
    activity_name = serializers.CharField()
    specialist_id = serializers.CharField(allow_null=True)
    specialist_name = serializers.CharField()
    space_id = serializers.CharField(allow_null=True)
    space_name = serializers.CharField()
    enrolled_count = serializers.IntegerField()
    capacity = serializers.IntegerField()
    utilization = serializers.FloatField()
    is_full = serializers.BooleanField()
    is_nearly_full = serializers.BooleanField()
    attendance_allowed = serializers.BooleanField()


class RosterEntrySerializer(serializers.Serializer):
    id = serializers.CharField(source="person_id")
    name = serializers.CharField()
    phone = serializers.CharField()
    whatsapp_link = serializers.CharField(allow_null=True)
    is_one_time = serializers.BooleanField()


class SessionRosterSerializer(serializers.Serializer):
    """Serializer for the people enrolled in one session occurrence."""

    session = SessionOccupancySerializer(source="occupancy")
    people = RosterEntrySerializer(many=True)


class NotificationSerializer(serializers.Serializer):
    """Serializer for a resolved notification."""

    id = serializers.CharField()
    type = serializers.CharField(source="type.value")
    created_at = serializers.DateTimeField()
    is_stale = serializers.BooleanField()
    person_name = serializers.CharField(allow_null=True)
    activity_name = serializers.CharField(allow_null=True)
    day_of_week = serializers.CharField(allow_null=True)
    time = serializers.CharField(allow_null=True)
    actions = serializers.SerializerMethodField()

    def get_actions(self, obj) -> list[str]:
        actions = ["enroll"] if obj.enroll is not None else []
        return [*actions, "dismiss"]


class AttendanceInputSerializer(serializers.Serializer):
    """Parses a roll call submission."""

    date = serializers.DateField()
    present_ids = serializers.ListField(child=serializers.CharField(), default=list)
    absent_ids = serializers.ListField(child=serializers.CharField(), default=list)
    justified_absence_ids = serializers.ListField(
        child=serializers.CharField(), default=list
    )
    one_time_attendees = serializers.ListField(
        child=serializers.CharField(), default=list
    )

    def to_changes(self) -> AttendanceChanges:
        data = self.validated_data
        return AttendanceChanges(
            present_ids=tuple(data["present_ids"]),
            absent_ids=tuple(data["absent_ids"]),
            justified_absence_ids=tuple(data["justified_absence_ids"]),
            one_time_attendees=tuple(data["one_time_attendees"]),
        )


class AttendanceRecordSerializer(serializers.Serializer):
    session_id = serializers.CharField()
    date = serializers.DateField()
    present_ids = serializers.ListField(child=serializers.CharField())
    absent_ids = serializers.ListField(child=serializers.CharField())
    justified_absence_ids = serializers.ListField(child=serializers.CharField())
    one_time_attendees = serializers.ListField(child=serializers.CharField())
