"""
Django management command to run one alert tick in-process.
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from alerts.services.alert_service import AlertService


class Command(BaseCommand):
    """Command to send weather alerts to every subscriber now."""

    help = "Send one round of weather alert SMS to all subscribers"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--lock-timeout",
            type=int,
            default=settings.ALERT_LOCK_TIMEOUT,
            help=(
                "Seconds the single-run lock is held at most "
                f"(default: {settings.ALERT_LOCK_TIMEOUT})"
            ),
        )

    def handle(self, *args, **options):
        """Execute the command."""
        self.stdout.write("Sending weather alerts...")

        summary = AlertService().run_guarded_tick(options["lock_timeout"])
        if summary is None:
            self.stdout.write(
                self.style.WARNING("Another alert run is in progress, nothing sent.")
            )
            return

        self.stdout.write(
            self.style.SUCCESS(
                "✓ Alert run finished\n"
                f"  - Subscribers: {summary['total']}\n"
                f"  - Sent: {summary['sent']}\n"
                f"  - Failed: {summary['failed']}\n"
            )
        )
