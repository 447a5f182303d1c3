"""
AlertService: One alert tick over every subscriber.

Subscribers are processed sequentially in store order. A failure for one
subscriber (weather fetch, SMS delivery, anything else) is logged and the
loop moves on to the next one.
"""

import logging

from django.core.cache import cache

from alerts.exceptions import NotFoundError
from alerts.schemas import current_conditions
from alerts.services.notification_service import NotificationService
from alerts.services.subscriber_service import SubscriberService
from alerts.services.weather_service import WeatherService, location_query

logger = logging.getLogger(__name__)

TICK_LOCK_KEY = "alerts:hourly-tick"


class AlertService:
    """Service for the hourly weather alert fan-out."""

    def __init__(
        self,
        subscriber_service: SubscriberService | None = None,
        weather_service: WeatherService | None = None,
        notification_service: NotificationService | None = None,
    ):
        self.subscriber_service = subscriber_service or SubscriberService()
        self.weather_service = weather_service or WeatherService()
        self.notification_service = notification_service or NotificationService()

    def alert_subscriber(self, subscriber) -> None:
        """
        Fetch current weather for the subscriber's city and send the alert.

        Raises:
            NotFoundError: If the provider could not resolve the city or
                returned no current conditions
        """
        payload = self.weather_service.fetch_weather(location_query(subscriber.city))
        if not payload.is_resolved or payload.current_conditions is None:
            raise NotFoundError(f"No current conditions for {subscriber.city}")
        current = current_conditions(payload)
        self.notification_service.send_alert(
            subscriber.phone_number, subscriber.city, current
        )

    def run_tick(self) -> dict:
        """
        Send one round of alerts.

        Returns:
            Summary dict with total, sent and failed counts
        """
        logger.info("Starting hourly alert job...")
        total = sent = failed = 0

        for subscriber in self.subscriber_service.all():
            total += 1
            try:
                self.alert_subscriber(subscriber)
            except Exception:
                failed += 1
                logger.exception(f"Failed to send alert to {subscriber.phone_number}")
                continue
            sent += 1
            logger.info(f"Sent alert to {subscriber.phone_number}")

        logger.info(
            f"Completed hourly alert job: {sent} sent, {failed} failed, {total} total"
        )
        return {"total": total, "sent": sent, "failed": failed}

    def run_guarded_tick(self, lock_timeout: int) -> dict | None:
        """
        Run a tick unless another one is still in flight.

        The lock expires after lock_timeout seconds so a crashed worker
        cannot block alerts forever.

        Returns:
            Tick summary, or None if the tick was skipped
        """
        if not cache.add(TICK_LOCK_KEY, "running", timeout=lock_timeout):
            logger.warning("Previous hourly alert job still running, skipping tick")
            return None

        try:
            return self.run_tick()
        finally:
            cache.delete(TICK_LOCK_KEY)
