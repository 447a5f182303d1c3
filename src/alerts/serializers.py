"""
Django REST Framework serializers for WeatherAlerts application.

Request serializers keep the public camelCase field names (phoneNumber).
"""

import re

from rest_framework import serializers

PHONE_NUMBER_PATTERN = re.compile(r"[0-9]{10}")


class WeatherQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/weather."""

    city = serializers.CharField(required=False, allow_blank=True)
    district = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        """Both city and district are required."""
        if not attrs.get("city") or not attrs.get("district"):
            raise serializers.ValidationError("City and district are required")
        return attrs


class SubscribeSerializer(serializers.Serializer):
    """
    Request body for POST /api/subscribe.

    Phone number must be exactly 10 digits; district and city are required.
    """

    phoneNumber = serializers.CharField(
        source="phone_number",
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        error_messages={"invalid": "Invalid phone number"},
    )
    district = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )
    city = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        """Validate phone number shape first, then district and city."""
        phone_number = attrs.get("phone_number") or ""
        if not PHONE_NUMBER_PATTERN.fullmatch(phone_number):
            raise serializers.ValidationError("Invalid phone number")
        if not attrs.get("district") or not attrs.get("city"):
            raise serializers.ValidationError("District and city are required")
        return attrs


class UnsubscribeSerializer(serializers.Serializer):
    """Request body for POST /api/unsubscribe."""

    phoneNumber = serializers.CharField(
        source="phone_number",
        required=False,
        allow_blank=True,
        allow_null=True,
    )

    def validate(self, attrs):
        if not attrs.get("phone_number"):
            raise serializers.ValidationError("Phone number is required")
        return attrs


class MessageSerializer(serializers.Serializer):
    """Success body: {"message": "..."}."""

    message = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    """Error body: {"error": "..."}."""

    error = serializers.CharField()
