"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in studio/domain/.
"""

import uuid

from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone

from studio.domain.schedule import WEEKDAY_NAMES


class Activity(models.Model):
    """Persistence model for activities."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "activities"

    def __str__(self) -> str:
        return self.name


class Specialist(models.Model):
    """Persistence model for specialists (instructors)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=50, blank=True, default="")

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Space(models.Model):
    """Persistence model for spaces (rooms)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField()

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Level(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Person(models.Model):
    """Persistence model for people (students)."""

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=50, blank=True, default="")
    status = models.CharField(
        max_length=10, choices=Status.choices, default=Status.ACTIVE
    )
    payment_due_date = models.DateField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["status"]),
        ]

    def __str__(self) -> str:
        return self.name


class VacationPeriod(models.Model):
    """Inclusive date range during which a person does not attend."""

    person = models.ForeignKey(
        Person, on_delete=models.CASCADE, related_name="vacations"
    )
    start_date = models.DateField()
    end_date = models.DateField()

    class Meta:
        ordering = ["start_date"]

    def __str__(self) -> str:
        return f"{self.person.name}: {self.start_date} - {self.end_date}"


class Session(models.Model):
    """Persistence model for weekly sessions."""

    class SessionType(models.TextChoices):
        INDIVIDUAL = "Individual", "Individual"
        GROUP = "Group", "Group"

    DAY_CHOICES = [(name, name) for name in WEEKDAY_NAMES.values()]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    activity = models.ForeignKey(
        Activity, on_delete=models.SET_NULL, null=True, related_name="sessions"
    )
    specialist = models.ForeignKey(
        Specialist, on_delete=models.SET_NULL, null=True, related_name="sessions"
    )
    space = models.ForeignKey(
        Space, on_delete=models.SET_NULL, null=True, related_name="sessions"
    )
    level = models.ForeignKey(
        Level, on_delete=models.SET_NULL, null=True, blank=True, related_name="sessions"
    )
    day_of_week = models.CharField(max_length=10, choices=DAY_CHOICES)
    time = models.CharField(
        max_length=5,
        help_text="HH:MM, 24h",
        validators=[
            RegexValidator(r"^([01]\d|2[0-3]):[0-5]\d$", "Enter a zero-padded HH:MM time.")
        ],
    )
    session_type = models.CharField(
        max_length=10, choices=SessionType.choices, default=SessionType.GROUP
    )
    people = models.ManyToManyField(Person, blank=True, related_name="sessions")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["day_of_week", "time"]
        indexes = [
            models.Index(fields=["day_of_week", "time"]),
        ]

    def __str__(self) -> str:
        activity = self.activity.name if self.activity else "Session"
        return f"{activity} - {self.day_of_week} {self.time}"


class AttendanceRecord(models.Model):
    """Attendance for one occurrence of a session."""

    session = models.ForeignKey(
        Session, on_delete=models.CASCADE, related_name="attendance_records"
    )
    date = models.DateField()
    present = models.ManyToManyField(
        Person, blank=True, related_name="present_records"
    )
    absent = models.ManyToManyField(
        Person, blank=True, related_name="absent_records"
    )
    justified_absences = models.ManyToManyField(
        Person, blank=True, related_name="justified_absence_records"
    )
    one_time_attendees = models.ManyToManyField(
        Person, blank=True, related_name="one_time_records"
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date"]
        constraints = [
            models.UniqueConstraint(
                fields=["session", "date"], name="unique_attendance_per_session_date"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.session} - {self.date}"


class Notification(models.Model):
    """Persistence model for dashboard notifications."""

    class Type(models.TextChoices):
        WAITLIST = "waitlist", "Waitlist"
        CHURN_RISK = "churnRisk", "Churn risk"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=20, choices=Type.choices)
    session = models.ForeignKey(
        Session, on_delete=models.SET_NULL, null=True, blank=True, related_name="notifications"
    )
    person = models.ForeignKey(
        Person, on_delete=models.SET_NULL, null=True, blank=True, related_name="notifications"
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.type} ({self.created_at:%Y-%m-%d})"
