from django_celery_beat.models import ClockedSchedule, PeriodicTask

from core.utils import get_file_logger

scheduler_logger = get_file_logger("scheduler", "scheduler.log")


class CeleryBeatScheduler:
    """Named-job scheduler backed by django-celery-beat one-off clocked tasks.

    A job name is the Celery task name. Each scheduled run is one
    ``PeriodicTask`` with ``one_off=True``; beat disables it after firing.
    """

    def pending(self, job_name):
        return PeriodicTask.objects.filter(task=job_name, one_off=True, enabled=True)

    def schedule(self, job_name, date, singular=False):
        if singular and self.pending(job_name).exists():
            scheduler_logger.info(f"{job_name} already has a pending run, not scheduling {date.isoformat()}")
            return None

        clocked, _ = ClockedSchedule.objects.get_or_create(clocked_time=date)
        task, created = PeriodicTask.objects.get_or_create(
            name=f"{job_name} @ {date.isoformat()}",
            defaults={
                "task": job_name,
                "clocked": clocked,
                "one_off": True,
            },
        )
        if created:
            scheduler_logger.info(f"Scheduled {job_name} for {date.isoformat()}")
        elif not task.enabled:
            # spent run for the same time: arm it again
            task.enabled = True
            task.total_run_count = 0
            task.last_run_at = None
            task.save()
            scheduler_logger.info(f"Re-enabled spent run of {job_name} for {date.isoformat()}")
        else:
            scheduler_logger.info(f"{job_name} was already scheduled for {date.isoformat()}")
        return task

    def mark_success(self, job_name):
        # Spent one-off runs stay in the table disabled; drop them with their clocks
        spent = PeriodicTask.objects.filter(task=job_name, one_off=True, enabled=False)
        clocked_ids = list(spent.values_list("clocked_id", flat=True))
        removed, _ = spent.delete()
        ClockedSchedule.objects.filter(id__in=clocked_ids, periodictask__isnull=True).delete()
        scheduler_logger.info(f"{job_name} run succeeded ({removed} spent entries pruned)")
