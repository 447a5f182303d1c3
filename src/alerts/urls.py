"""
URL configuration for alerts app.
"""

from django.urls import path

from . import views

app_name = "alerts"

urlpatterns = [
    path("health", views.health_view, name="health"),
    path("weather", views.weather_view, name="weather"),
    path("subscribe", views.subscribe_view, name="subscribe"),
    path("unsubscribe", views.unsubscribe_view, name="unsubscribe"),
]
