from django.core.management.base import BaseCommand

from core.scheduling import CeleryBeatScheduler
from digests.dispatcher import schedule_first_run


class Command(BaseCommand):
    help = "Register today's digest run unless one is already pending"

    def handle(self, *args, **options):
        task = schedule_first_run(CeleryBeatScheduler())
        if task is None:
            self.stdout.write("A digest run is already pending.")
        else:
            self.stdout.write(self.style.SUCCESS(f"Scheduled {task.name}"))
