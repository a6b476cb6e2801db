"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from studio import models
from studio.domain.schedule import weekday_name


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def today() -> date:
    return timezone.localdate()


@pytest.fixture
def studio(db, today: date) -> dict:
    """A small studio with one early session held today and its people."""
    yoga = models.Activity.objects.create(name="Yoga")
    room = models.Space.objects.create(name="Room A", capacity=2)
    teacher = models.Specialist.objects.create(name="Xavier")
    ana = models.Person.objects.create(name="Ana", phone="+54 11 5555-0001")
    bruno = models.Person.objects.create(name="Bruno")
    session = models.Session.objects.create(
        activity=yoga,
        space=room,
        specialist=teacher,
        day_of_week=weekday_name(today),
        time="00:00",
    )
    session.people.add(ana)
    return {
        "activity": yoga,
        "space": room,
        "specialist": teacher,
        "ana": ana,
        "bruno": bruno,
        "session": session,
    }
