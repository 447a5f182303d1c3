"""
NotificationService: SMS dispatch through Twilio.

Message templates live here so the confirmation and alert texts use the same
units (°F, mph) as the weather request (unitGroup=us).
"""

import logging

import requests
from django.conf import settings
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from alerts.exceptions import DeliveryError
from alerts.models import NotificationLog
from alerts.schemas import CurrentConditions

logger = logging.getLogger(__name__)

CONFIRMATION_TEMPLATE = (
    "You've subscribed to hourly weather alerts for {city}, {district}. "
    "Reply STOP to unsubscribe."
)

ALERT_TEMPLATE = (
    "Weather alert for {city}: {conditions}, "
    "Temp: {temp}°F (feels like {feelslike}°F), "
    "Humidity: {humidity}%, Wind: {windspeed} mph"
)


def format_confirmation(city: str, district: str) -> str:
    return CONFIRMATION_TEMPLATE.format(city=city, district=district)


def format_alert(city: str, current: CurrentConditions) -> str:
    return ALERT_TEMPLATE.format(
        city=city,
        conditions=current.conditions,
        temp=current.temp,
        feelslike=current.feelslike,
        humidity=current.humidity,
        windspeed=current.windspeed,
    )


class NotificationService:
    """Service for sending SMS to subscribers."""

    def __init__(
        self,
        client: Client | None = None,
        from_number: str | None = None,
        country_code: str | None = None,
        enabled: bool | None = None,
    ):
        self._client = client
        self.from_number = from_number or settings.TWILIO_PHONE_NUMBER
        self.country_code = country_code or settings.SMS_COUNTRY_CODE
        self.enabled = enabled if enabled is not None else settings.SMS_DISPATCH_ENABLED

    @property
    def client(self) -> Client:
        """Twilio client, built from settings on first use."""
        if self._client is None:
            self._client = Client(
                settings.TWILIO_ACCOUNT_SID,
                settings.TWILIO_AUTH_TOKEN,
            )
        return self._client

    def international_number(self, phone_number: str) -> str:
        """Stored 10-digit local number -> E.164, e.g. '+919876543210'."""
        return f"{self.country_code}{phone_number}"

    def send_sms(
        self, phone_number: str, body: str, kind: str = "alert"
    ) -> NotificationLog:
        """
        Send an SMS to a stored local phone number.

        When dispatch is disabled (APP_ENV=test) nothing is sent and the
        attempt is recorded as skipped.

        Args:
            phone_number: 10-digit local number as stored on the subscriber
            body: Message text
            kind: "confirmation" or "alert"

        Returns:
            NotificationLog row for this attempt

        Raises:
            DeliveryError: If the provider rejects the message
        """
        if not self.enabled:
            logger.info(f"SMS dispatch disabled, skipping {kind} to {phone_number}")
            return NotificationLog.objects.create(
                phone_number=phone_number,
                kind=kind,
                status="skipped",
                body=body,
            )

        try:
            message = self.client.messages.create(
                body=body,
                from_=self.from_number,
                to=self.international_number(phone_number),
            )
        except (TwilioException, requests.RequestException) as e:
            logger.error(f"SMS {kind} to {phone_number} failed: {e}")
            NotificationLog.objects.create(
                phone_number=phone_number,
                kind=kind,
                status="failed",
                body=body,
                error_message=str(e),
            )
            raise DeliveryError(f"Failed to send SMS to {phone_number}") from e

        logger.info(f"SMS {kind} sent to {phone_number} (sid={message.sid})")
        return NotificationLog.objects.create(
            phone_number=phone_number,
            kind=kind,
            status="sent",
            body=body,
            provider_sid=message.sid or "",
        )

    def send_confirmation(self, phone_number: str, city: str, district: str):
        return self.send_sms(
            phone_number, format_confirmation(city, district), kind="confirmation"
        )

    def send_alert(self, phone_number: str, city: str, current: CurrentConditions):
        return self.send_sms(phone_number, format_alert(city, current), kind="alert")
