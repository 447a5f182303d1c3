"""
Django REST Framework views for WeatherAlerts application.
"""

import logging

from drf_spectacular.utils import (
    OpenApiExample,
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
)
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .exceptions import (
    DuplicateError,
    NotFoundError,
    UpstreamError,
    ValidationError,
    first_error_message,
)
from .schemas import build_snapshot
from .serializers import (
    ErrorSerializer,
    MessageSerializer,
    SubscribeSerializer,
    UnsubscribeSerializer,
    WeatherQuerySerializer,
)
from .services.notification_service import NotificationService
from .services.subscriber_service import SubscriberService
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


def validated(serializer) -> dict:
    """Return validated data or raise ValidationError with the first message."""
    if not serializer.is_valid():
        raise ValidationError(first_error_message(serializer.errors))
    return serializer.validated_data


def already_subscribed_response(subscriber) -> Response:
    return Response(
        {
            "message": (
                f"You're already subscribed for {subscriber.city}, "
                f"{subscriber.district}"
            )
        },
        status=status.HTTP_200_OK,
    )


@extend_schema(
    tags=["Meta"],
    summary="Health Check",
    responses={200: OpenApiResponse(description="Service is up")},
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_view(request):
    return Response({"status": "healthy"}, status=status.HTTP_200_OK)


# Weather Views
@extend_schema(
    tags=["Weather"],
    summary="Get Weather Data",
    description=(
        "Current conditions, today's hourly forecast and a 7-day forecast. "
        "The city is looked up first; the district is used if the city "
        "cannot be resolved."
    ),
    parameters=[
        OpenApiParameter(
            name="city",
            type=str,
            location=OpenApiParameter.QUERY,
            required=True,
            examples=[OpenApiExample("Chennai", value="Chennai")],
        ),
        OpenApiParameter(
            name="district",
            type=str,
            location=OpenApiParameter.QUERY,
            required=True,
            examples=[OpenApiExample("Chennai", value="Chennai")],
        ),
    ],
    responses={
        200: OpenApiResponse(
            description="Weather snapshot",
            examples=[
                OpenApiExample(
                    "Success Response",
                    value={
                        "address": "Chennai, Tamil Nadu, India",
                        "currentConditions": {
                            "temp": 86.2,
                            "feelslike": 95.1,
                            "humidity": 70.3,
                            "windspeed": 8.1,
                            "conditions": "Partially cloudy",
                        },
                        "hourly": [{"time": "12 AM", "temp": 82.0}],
                        "daily": [{"date": "Monday, 14 Oct", "tempmax": 91.0}],
                    },
                )
            ],
        ),
        400: ErrorSerializer,
        404: ErrorSerializer,
        500: ErrorSerializer,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def weather_view(request):
    """
    Weather lookup endpoint.

    GET /api/weather?city={city}&district={district}
    """
    params = validated(WeatherQuerySerializer(data=request.query_params))

    weather_service = WeatherService()
    try:
        payload = weather_service.resolve(params["city"], params["district"])
        snapshot = build_snapshot(payload) if payload is not None else None
    except Exception as e:
        logger.exception("Error in /api/weather")
        return Response(
            {"error": str(e) or UpstreamError.default_message},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if snapshot is None:
        raise NotFoundError("Location not found")

    return Response(snapshot.to_response(), status=status.HTTP_200_OK)


# Subscription Views
@extend_schema(
    tags=["Subscriptions"],
    summary="Subscribe",
    description=(
        "Subscribe a 10-digit phone number to hourly weather alerts. "
        "A confirmation SMS is sent on first subscription."
    ),
    request=SubscribeSerializer,
    responses={
        201: MessageSerializer,
        200: OpenApiResponse(
            response=MessageSerializer,
            description="Phone number is already subscribed",
        ),
        400: ErrorSerializer,
        500: ErrorSerializer,
    },
)
@api_view(["POST"])
@permission_classes([AllowAny])
def subscribe_view(request):
    """
    Subscription create endpoint.

    POST /api/subscribe
    The record is committed before the confirmation SMS; if the SMS fails
    the caller gets a 500 and the subscription stays in place.
    """
    data = validated(SubscribeSerializer(data=request.data))
    phone_number = data["phone_number"]
    district = data["district"]
    city = data["city"]

    subscriber_service = SubscriberService()
    try:
        existing = subscriber_service.find_by_phone(phone_number)
        if existing:
            return already_subscribed_response(existing)

        try:
            subscriber_service.create(phone_number, district, city)
        except DuplicateError:
            # Concurrent subscribe for the same number won the insert
            return already_subscribed_response(
                subscriber_service.find_by_phone(phone_number)
            )

        NotificationService().send_confirmation(phone_number, city, district)
    except Exception:
        logger.exception("Error in /api/subscribe")
        return Response(
            {"error": "Subscription failed"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(
        {"message": "Subscription successful"},
        status=status.HTTP_201_CREATED,
    )


@extend_schema(
    tags=["Subscriptions"],
    summary="Unsubscribe",
    request=UnsubscribeSerializer,
    responses={
        200: MessageSerializer,
        400: ErrorSerializer,
        404: ErrorSerializer,
        500: ErrorSerializer,
    },
)
@api_view(["POST"])
@permission_classes([AllowAny])
def unsubscribe_view(request):
    """
    Subscription delete endpoint.

    POST /api/unsubscribe
    """
    data = validated(UnsubscribeSerializer(data=request.data))

    try:
        deleted = SubscriberService().delete_by_phone(data["phone_number"])
    except Exception:
        logger.exception("Error in /api/unsubscribe")
        return Response(
            {"error": "Failed to unsubscribe"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not deleted:
        raise NotFoundError("Subscription not found")

    return Response(
        {"message": "Unsubscribed successfully"},
        status=status.HTTP_200_OK,
    )
