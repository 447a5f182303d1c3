"""
WeatherService: Weather data fetching from the Visual Crossing timeline API.

One attempt per call: no caching and no retries. Transport failures and
non-success responses are raised as UpstreamError.
"""

import logging

import requests
from django.conf import settings
from pydantic import ValidationError as PayloadValidationError

from alerts.exceptions import UpstreamError
from alerts.schemas import TimelinePayload

logger = logging.getLogger(__name__)


def location_query(name: str) -> str:
    """
    Build the free-text location string sent to the provider.

    Example: "Chennai" -> "Chennai,Tamil Nadu,India"
    """
    return f"{name},{settings.WEATHER_LOCATION_SUFFIX}"


class WeatherService:
    """Service for fetching weather data from the weather provider."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: int | None = None,
    ):
        self.base_url = (base_url or settings.WEATHER_API_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.WEATHER_API_KEY
        self.timeout = timeout if timeout is not None else settings.WEATHER_API_TIMEOUT

    def fetch_weather(self, location: str) -> TimelinePayload:
        """
        Fetch the timeline (current conditions, hours and days) for a location.

        Args:
            location: Location query, e.g. "Chennai,Tamil Nadu,India"

        Returns:
            Parsed provider payload. It may carry an errorCode when the
            provider could not resolve the location.

        Raises:
            UpstreamError: If the request fails, the provider answers with a
                non-success status, or the body is not a timeline document
        """
        url = f"{self.base_url}/{location}"
        params = {
            "unitGroup": "us",
            "key": self.api_key,
            "contentType": "json",
        }

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            api_data = response.json()
        except requests.RequestException as e:
            logger.error(f"Weather API request failed for '{location}': {e}")
            raise UpstreamError() from e
        except ValueError as e:
            logger.error(f"Weather API returned invalid JSON for '{location}': {e}")
            raise UpstreamError() from e

        if not isinstance(api_data, dict):
            logger.error(f"Unexpected weather payload for '{location}': {api_data!r}")
            raise UpstreamError()

        try:
            payload = TimelinePayload.model_validate(api_data)
        except PayloadValidationError as e:
            logger.error(f"Malformed weather payload for '{location}': {e}")
            raise UpstreamError() from e

        logger.info(f"Fetched weather for '{location}'")
        return payload

    def resolve(self, *names: str) -> TimelinePayload | None:
        """
        Try each location name in turn and return the first resolved payload.

        A payload with an errorCode or no data counts as unresolved; provider
        transport errors are not swallowed.

        Returns:
            The first resolved payload, or None if no name resolved.
        """
        for name in names:
            payload = self.fetch_weather(location_query(name))
            if payload.is_resolved:
                return payload
            logger.info(f"Location '{name}' not resolved (errorCode={payload.error_code})")
        return None
