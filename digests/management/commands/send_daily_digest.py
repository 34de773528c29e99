"""
Send yesterday's digest emails now instead of waiting for the scheduled run.

The next run is still scheduled for tomorrow at DIGEST_SEND_HOUR.
"""

from django.core.management.base import BaseCommand

from core.scheduling import CeleryBeatScheduler
from digests.dispatcher import run_daily_digest


class Command(BaseCommand):
    help = "Send the daily digest emails for yesterday's project activity"

    def handle(self, *args, **options):
        self.stdout.write("Starting daily digest...")
        result = run_daily_digest(CeleryBeatScheduler())

        self.stdout.write(
            self.style.SUCCESS(
                f"Digest for {result['day']} complete: {result['emails_sent']} emails sent, "
                f"{result['emails_failed']} failed. Next run {result['next_run']}"
            )
        )
