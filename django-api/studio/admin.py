from django.contrib import admin

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


class VacationPeriodInline(admin.TabularInline):
    model = VacationPeriod
    extra = 1


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    list_display = ["name", "phone", "status", "payment_due_date"]
    list_filter = ["status"]
    search_fields = ["name", "phone"]
    inlines = [VacationPeriodInline]


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ["activity", "day_of_week", "time", "session_type", "space", "specialist"]
    list_filter = ["day_of_week", "session_type", "activity", "space", "specialist"]
    filter_horizontal = ["people"]


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    list_display = ["session", "date", "updated_at"]
    list_filter = ["date"]
    filter_horizontal = ["present", "absent", "justified_absences", "one_time_attendees"]


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["type", "person", "session", "created_at"]
    list_filter = ["type"]


@admin.register(Space)
class SpaceAdmin(admin.ModelAdmin):
    list_display = ["name", "capacity"]


admin.site.register(Activity)
admin.site.register(Specialist)
admin.site.register(Level)
