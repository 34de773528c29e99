import os

from celery import Celery
from celery.signals import beat_init

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "taskboard.settings")

app = Celery("taskboard")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


@beat_init.connect
def schedule_first_digest(sender=None, **kwargs):
    # Same as the first run registered at application start: today at the send hour, once
    from core.scheduling import CeleryBeatScheduler
    from digests.dispatcher import schedule_first_run

    schedule_first_run(CeleryBeatScheduler())
