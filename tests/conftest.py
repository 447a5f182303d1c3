"""
Pytest configuration and shared fixtures for WeatherAlerts tests.
"""

import pytest

# 2024-10-14 00:00 Asia/Kolkata (Monday)
DAY_START_EPOCH = 1728844200


@pytest.fixture(autouse=True)
def test_settings(settings):
    """
    Isolate every test from external services.

    In-memory cache instead of Redis, SMS dispatch disabled and fixed
    provider settings.
    """
    settings.CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "LOCATION": "weather-alerts-tests",
        }
    }
    settings.SMS_DISPATCH_ENABLED = False
    settings.WEATHER_API_KEY = "test-api-key"
    settings.WEATHER_API_URL = "https://weather.example.com/timeline"
    settings.WEATHER_API_TIMEOUT = 10
    settings.WEATHER_LOCATION_SUFFIX = "Tamil Nadu,India"
    settings.TWILIO_PHONE_NUMBER = "+15005550006"
    settings.SMS_COUNTRY_CODE = "+91"
    settings.ALERT_LOCK_TIMEOUT = 3300
    return settings


@pytest.fixture(autouse=True)
def clear_cache(test_settings):
    """Start each test with an empty cache so the tick lock is free."""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """
    Provide a DRF API client for testing API endpoints.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def day_start_epoch():
    """Epoch of the first day in timeline_payload."""
    return DAY_START_EPOCH


@pytest.fixture
def timeline_payload():
    """Visual Crossing timeline response for Chennai (trimmed)."""
    hours = [
        {
            "datetime": f"{hour:02d}:00:00",
            "datetimeEpoch": DAY_START_EPOCH + hour * 3600,
            "temp": 80.0 + hour / 2,
            "feelslike": 84.0 + hour / 2,
            "humidity": 75.0,
            "precip": 0.0,
            "precipprob": 10.0,
            "windspeed": 6.5,
            "winddir": 120.0,
            "conditions": "Partially cloudy",
            "icon": "partly-cloudy-night",
        }
        for hour in range(24)
    ]
    days = [
        {
            "datetime": f"2024-10-{14 + offset}",
            "datetimeEpoch": DAY_START_EPOCH + offset * 86400,
            "tempmax": 91.0,
            "tempmin": 78.5,
            "temp": 84.2,
            "feelslike": 92.0,
            "humidity": 72.1,
            "precip": 0.12,
            "precipprob": 35.0,
            "windspeed": 9.4,
            "winddir": 140.0,
            "conditions": "Rain, Partially cloudy",
            "icon": "rain",
            "sunrise": "06:01:12",
            "sunset": "17:54:40",
            "description": "Partly cloudy throughout the day with rain.",
            "hours": hours if offset == 0 else [],
        }
        for offset in range(15)
    ]
    return {
        "queryCost": 1,
        "latitude": 13.0878,
        "longitude": 80.2785,
        "resolvedAddress": "Chennai, Tamil Nadu, India",
        "address": "Chennai,Tamil Nadu,India",
        "timezone": "Asia/Kolkata",
        "tzoffset": 5.5,
        "days": days,
        "currentConditions": {
            "datetime": "15:00:00",
            "datetimeEpoch": DAY_START_EPOCH + 15 * 3600,
            "temp": 86.2,
            "feelslike": 95.1,
            "humidity": 70.3,
            "precip": 0.0,
            "snow": 0.0,
            "windspeed": 8.1,
            "winddir": 130.0,
            "pressure": 1008.0,
            "visibility": 6.2,
            "uvindex": 7.0,
            "conditions": "Partially cloudy",
            "icon": "partly-cloudy-day",
            "sunrise": "06:01:12",
            "sunset": "17:54:40",
        },
    }


@pytest.fixture
def mock_weather_response(timeline_payload):
    """Build a fake requests.Response for a JSON body and status code."""
    from unittest.mock import Mock

    import requests

    def build(data=None, status_code=200):
        response = Mock()
        response.status_code = status_code
        response.json.return_value = timeline_payload if data is None else data
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Client Error"
            )
        else:
            response.raise_for_status.return_value = None
        return response

    return build
