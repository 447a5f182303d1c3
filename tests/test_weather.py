"""
Tests for the weather and health API endpoints.

This module tests:
- GET /api/weather: parameter validation, city/district fallback, 404, 500
- GET /api/health
"""

from unittest.mock import patch

import requests
from rest_framework import status


class TestHealthView:
    """Tests for GET /api/health."""

    def test_health(self, api_client):
        response = api_client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "healthy"}


class TestWeatherView:
    """Tests for GET /api/weather."""

    @patch("alerts.services.weather_service.requests.get")
    def test_weather_success(self, mock_get, api_client, mock_weather_response):
        """Test the full snapshot for a city that resolves."""
        mock_get.return_value = mock_weather_response()

        response = api_client.get(
            "/api/weather", {"city": "Chennai", "district": "Chennai"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["address"] == "Chennai, Tamil Nadu, India"
        assert data["currentConditions"]["temp"] == 86.2
        assert data["currentConditions"]["sunrise"] == "06:01:12"
        assert len(data["hourly"]) == 24
        assert data["hourly"][15]["time"] == "03 PM"
        assert len(data["daily"]) == 7
        assert data["daily"][0]["date"] == "Monday, 14 Oct"
        mock_get.assert_called_once()

    def test_weather_missing_district(self, api_client):
        """Test that both parameters are required."""
        response = api_client.get("/api/weather", {"city": "Chennai"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "City and district are required"}

    def test_weather_missing_both(self, api_client):
        response = api_client.get("/api/weather")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "City and district are required"}

    @patch("alerts.services.weather_service.requests.get")
    def test_weather_falls_back_to_district(
        self, mock_get, api_client, mock_weather_response
    ):
        """Test that an unresolved city is retried with the district."""
        mock_get.side_effect = [
            mock_weather_response(data={"errorCode": 999}),
            mock_weather_response(),
        ]

        response = api_client.get(
            "/api/weather", {"city": "Guindy", "district": "Chennai"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert mock_get.call_count == 2
        assert mock_get.call_args.args[0].endswith("/Chennai,Tamil Nadu,India")

    @patch("alerts.services.weather_service.requests.get")
    def test_weather_location_not_found(
        self, mock_get, api_client, mock_weather_response
    ):
        """Test 404 when neither city nor district resolves."""
        mock_get.return_value = mock_weather_response(data={"errorCode": 999})

        response = api_client.get(
            "/api/weather", {"city": "Atlantis", "district": "Lemuria"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Location not found"}

    @patch("alerts.services.weather_service.requests.get")
    def test_weather_provider_unreachable(self, mock_get, api_client):
        """Test 500 with the error message on transport failure."""
        mock_get.side_effect = requests.ConnectionError("Connection refused")

        response = api_client.get(
            "/api/weather", {"city": "Chennai", "district": "Chennai"}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to fetch weather data"}

    @patch("alerts.services.weather_service.requests.get")
    def test_weather_unexpected_failure(self, mock_get, api_client):
        """Test that any other failure also yields 500 with its message."""
        mock_get.side_effect = RuntimeError("boom")

        response = api_client.get(
            "/api/weather", {"city": "Chennai", "district": "Chennai"}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "boom"}
