"""
Error kinds for WeatherAlerts and the DRF exception handler.

Every API error body has the shape {"error": "<message>"}.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class WeatherAlertsError(Exception):
    """Base class for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WeatherAlertsError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(WeatherAlertsError):
    """Unknown location or unknown subscription."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UpstreamError(WeatherAlertsError):
    """Weather provider transport failure or non-success response."""

    default_message = "Failed to fetch weather data"


class DeliveryError(WeatherAlertsError):
    """SMS provider rejected the message."""

    default_message = "Failed to send SMS"


class DuplicateError(WeatherAlertsError):
    """A subscriber with this phone number already exists."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Phone number is already subscribed"


def first_error_message(detail) -> str:
    """
    Pick the first human-readable message out of a DRF error structure.

    DRF errors arrive as strings, lists, or dicts of lists (field errors).
    """
    if isinstance(detail, dict):
        if not detail:
            return GENERIC_ERROR_MESSAGE
        return first_error_message(next(iter(detail.values())))
    if isinstance(detail, (list, tuple)):
        if not detail:
            return GENERIC_ERROR_MESSAGE
        return first_error_message(detail[0])
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF exception handler.

    Maps application errors to their status codes, flattens DRF errors to
    {"error": message} and turns anything else into a generic 500.
    """
    if isinstance(exc, WeatherAlertsError):
        return Response({"error": exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": first_error_message(response.data)}
        return response

    view = context.get("view")
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'view'}: {exc}",
        exc_info=exc,
    )
    return Response(
        {"error": GENERIC_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
