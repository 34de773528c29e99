from celery import shared_task

from core.scheduling import CeleryBeatScheduler
from digests.dispatcher import run_daily_digest


@shared_task
def send_digest_task():
    return run_daily_digest(CeleryBeatScheduler())
