"""
Celery tasks for WeatherAlerts.

send_hourly_alerts is scheduled by Celery beat at the top of every hour
(see config/celery.py).
"""

import logging

from celery import shared_task
from django.conf import settings

from alerts.services.alert_service import AlertService

logger = logging.getLogger(__name__)


@shared_task(name="alerts.tasks.send_hourly_alerts", ignore_result=False)
def send_hourly_alerts():
    """Fan out one alert SMS per subscriber. Never raises per-subscriber errors."""
    summary = AlertService().run_guarded_tick(settings.ALERT_LOCK_TIMEOUT)
    if summary is None:
        return {"skipped": True}
    return summary
