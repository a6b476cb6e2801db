"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from studio import models
from studio.cache import NOTIFICATIONS_KEY, SUMMARY_KEY


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_summary_is_cached(self, api_client: APIClient):
        api_client.get("/api/dashboard")
        assert cache.get(SUMMARY_KEY)["active_people"] == 0

    def test_person_save_invalidates_summary(self, api_client: APIClient):
        api_client.get("/api/dashboard")

        models.Person.objects.create(name="Ana")

        assert cache.get(SUMMARY_KEY) is None
        assert api_client.get("/api/dashboard").json()["active_people"] == 1

    def test_enrollment_change_invalidates_cache(self, api_client: APIClient, studio: dict):
        api_client.get("/api/dashboard")
        api_client.get("/api/notifications")

        studio["session"].people.add(studio["bruno"])

        assert cache.get(SUMMARY_KEY) is None
        assert cache.get(NOTIFICATIONS_KEY) is None

    def test_dismiss_invalidates_notification_cache(self, api_client: APIClient, studio: dict):
        notification = models.Notification.objects.create(type="churnRisk", person=studio["ana"])
        assert len(api_client.get("/api/notifications").json()) == 1

        api_client.post(f"/api/notifications/{notification.pk}/dismiss")

        assert api_client.get("/api/notifications").json() == []

    def test_unrelated_model_does_not_invalidate(self, api_client: APIClient):
        from django.contrib.auth.models import Group

        api_client.get("/api/dashboard")
        Group.objects.create(name="staff")

        assert cache.get(SUMMARY_KEY) is not None
