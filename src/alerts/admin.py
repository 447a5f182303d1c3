"""
Django admin configuration for WeatherAlerts application.
"""

from django.contrib import admin

from .models import NotificationLog, Subscriber


@admin.register(Subscriber)
class SubscriberAdmin(admin.ModelAdmin):
    """Admin configuration for Subscriber model."""

    list_display = ["phone_number", "city", "district", "created_at"]
    list_filter = ["city", "district", "created_at"]
    search_fields = ["phone_number", "city", "district"]
    ordering = ["-created_at"]
    readonly_fields = ["created_at"]

    def has_change_permission(self, request, obj=None):
        # Subscribers are never edited, only created and deleted
        return False


@admin.register(NotificationLog)
class NotificationLogAdmin(admin.ModelAdmin):
    """Admin configuration for NotificationLog model."""

    list_display = [
        "phone_number",
        "kind",
        "status",
        "provider_sid",
        "created_at",
    ]
    list_filter = ["kind", "status", "created_at"]
    search_fields = ["phone_number", "body", "error_message"]
    ordering = ["-created_at"]
    readonly_fields = [
        "phone_number",
        "kind",
        "status",
        "body",
        "provider_sid",
        "error_message",
        "created_at",
    ]
    date_hierarchy = "created_at"

    def has_add_permission(self, request):
        return False
