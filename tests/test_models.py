"""
Tests for Django models.
"""

from datetime import datetime, timezone as dt_timezone

import pytest
from django.db import IntegrityError
from freezegun import freeze_time

from alerts.models import NotificationLog, Subscriber
from tests.factories import NotificationLogFactory, SubscriberFactory


class TestSubscriber:
    """Tests for Subscriber model."""

    def test_subscriber_str(self, db):
        """Test Subscriber __str__ method."""
        subscriber = SubscriberFactory(
            phone_number="9876543210", district="Chennai", city="Chennai"
        )
        assert str(subscriber) == "9876543210 - Chennai, Chennai"

    def test_phone_number_uniqueness(self, db):
        """Test that a phone number can only be subscribed once."""
        Subscriber.objects.create(
            phone_number="9876543210", district="Chennai", city="Chennai"
        )
        with pytest.raises(IntegrityError):
            Subscriber.objects.create(
                phone_number="9876543210", district="Madurai", city="Madurai"
            )

    @freeze_time("2024-10-14 09:30:00")
    def test_created_at_set_on_insert(self, db):
        """Test that created_at is set automatically."""
        subscriber = SubscriberFactory()
        assert subscriber.created_at == datetime(
            2024, 10, 14, 9, 30, tzinfo=dt_timezone.utc
        )

    def test_default_ordering_is_oldest_first(self, db):
        """Test that subscribers come back in insertion order."""
        with freeze_time("2024-10-14 09:00:00"):
            first = SubscriberFactory()
        with freeze_time("2024-10-14 10:00:00"):
            second = SubscriberFactory()

        assert list(Subscriber.objects.all()) == [first, second]


class TestNotificationLog:
    """Tests for NotificationLog model."""

    def test_notification_log_str(self, db):
        """Test NotificationLog __str__ method."""
        log = NotificationLogFactory(
            phone_number="9876543210", kind="confirmation", status="skipped"
        )
        assert str(log) == "9876543210 - confirmation - skipped"

    def test_defaults(self, db):
        """Test that provider_sid and error_message default to blank."""
        log = NotificationLog.objects.create(
            phone_number="9876543210", kind="alert", status="failed", body="x"
        )
        assert log.provider_sid == ""
        assert log.error_message == ""

    def test_ordering_newest_first(self, db):
        """Test that logs come back newest first."""
        with freeze_time("2024-10-14 09:00:00"):
            older = NotificationLogFactory()
        with freeze_time("2024-10-14 10:00:00"):
            newer = NotificationLogFactory()

        assert list(NotificationLog.objects.all()) == [newer, older]

    def test_log_survives_unsubscribe(self, db):
        """Test that history is kept after the subscriber is deleted."""
        subscriber = SubscriberFactory(phone_number="9876543210")
        NotificationLogFactory(phone_number=subscriber.phone_number)

        subscriber.delete()

        assert NotificationLog.objects.filter(phone_number="9876543210").exists()
