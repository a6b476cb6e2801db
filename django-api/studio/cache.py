"""Cache keys for dashboard responses that do not depend on request input."""

import logging

from django.core.cache import cache

logger = logging.getLogger(__name__)

SUMMARY_KEY = "dashboard:summary"
NOTIFICATIONS_KEY = "dashboard:notifications"


def invalidate_dashboard() -> None:
    cache.delete_many([SUMMARY_KEY, NOTIFICATIONS_KEY])
    logger.debug("Invalidated dashboard cache")
