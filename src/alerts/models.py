"""
Django models for WeatherAlerts application.
"""

from django.db import models


class Subscriber(models.Model):
    """
    A phone number enrolled for hourly weather alerts.

    Tied to exactly one city/district. Created on subscribe and deleted on
    unsubscribe; never updated in between.
    """

    phone_number = models.CharField(max_length=10, unique=True)
    district = models.CharField(max_length=100)
    city = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "subscribers"
        verbose_name = "Subscriber"
        verbose_name_plural = "Subscribers"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.phone_number} - {self.city}, {self.district}"


class NotificationLog(models.Model):
    """
    NotificationLog model for tracking SMS delivery.

    One row per dispatch attempt (confirmation or alert). The phone number
    is stored as text so history outlives the subscription.
    """

    KIND_CHOICES = [
        ("confirmation", "Confirmation"),
        ("alert", "Alert"),
    ]

    STATUS_CHOICES = [
        ("sent", "Sent"),
        ("skipped", "Skipped"),
        ("failed", "Failed"),
    ]

    phone_number = models.CharField(max_length=10, db_index=True)
    kind = models.CharField(max_length=20, choices=KIND_CHOICES)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES)
    body = models.TextField()
    provider_sid = models.CharField(max_length=64, blank=True)
    error_message = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notification_logs"
        verbose_name = "Notification Log"
        verbose_name_plural = "Notification Logs"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["status", "created_at"], name="notif_status_created_idx"
            ),
        ]

    def __str__(self):
        return f"{self.phone_number} - {self.kind} - {self.status}"
