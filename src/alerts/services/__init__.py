"""
Services layer for WeatherAlerts.

This package contains business logic services:
- WeatherService: Weather data fetching from the provider
- SubscriberService: Subscriber lookup, creation and removal
- NotificationService: SMS dispatch
- AlertService: Hourly alert fan-out
"""
