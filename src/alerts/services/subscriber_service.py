"""
SubscriberService: Store operations over the Subscriber table.

Phone number is the natural key. There is no update operation.
"""

import logging
from collections.abc import Iterator

from django.db import IntegrityError, transaction

from alerts.exceptions import DuplicateError
from alerts.models import Subscriber

logger = logging.getLogger(__name__)


class SubscriberService:
    """Service for subscriber lookup, creation and removal."""

    def find_by_phone(self, phone_number: str) -> Subscriber | None:
        return Subscriber.objects.filter(phone_number=phone_number).first()

    def create(self, phone_number: str, district: str, city: str) -> Subscriber:
        """
        Create a subscriber.

        Relies on the unique constraint on phone_number, so two concurrent
        subscribe requests for the same number cannot both succeed.

        Raises:
            DuplicateError: If the phone number is already subscribed
        """
        try:
            with transaction.atomic():
                subscriber = Subscriber.objects.create(
                    phone_number=phone_number,
                    district=district,
                    city=city,
                )
        except IntegrityError as e:
            raise DuplicateError() from e

        logger.info(f"Created subscriber {phone_number} for {city}, {district}")
        return subscriber

    def delete_by_phone(self, phone_number: str) -> bool:
        """Delete the subscriber; True if a record was removed."""
        deleted, _ = Subscriber.objects.filter(phone_number=phone_number).delete()
        if deleted:
            logger.info(f"Deleted subscriber {phone_number}")
        return deleted > 0

    def all(self) -> Iterator[Subscriber]:
        """Every subscriber in store order (oldest first)."""
        return Subscriber.objects.order_by("created_at", "id").iterator()
