from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from django.conf import settings
from django.contrib.auth import get_user_model
from django.utils import timezone

from core.utils import absolute_url, get_file_logger
from digests.models import DigestEvent
from notifications.email_service import build_email_data, send_email
from projects.access import find_project_for_user

digest_logger = get_file_logger("digests", "digests.log")

JOB_NAME = "digests.tasks.send_digest_task"

BUCKETS = {
    "completed": [DigestEvent.COMPLETE],
    "created": [DigestEvent.CREATE],
    "updated": [DigestEvent.UPDATE, DigestEvent.UNCOMPLETE],
    "removed": [DigestEvent.REMOVE, DigestEvent.DELETE_FOREVER],
}


@dataclass
class ProjectDigest:
    project: object
    completed: list = field(default_factory=list)
    created: list = field(default_factory=list)
    updated: list = field(default_factory=list)
    removed: list = field(default_factory=list)

    @property
    def is_empty(self):
        return not (self.completed or self.created or self.updated or self.removed)


# ============================================================
#                       DATES
# ============================================================

def digest_day(now=None):
    """The day a run reports on: yesterday, in the site's time zone."""
    now = timezone.localtime(now or timezone.now())
    return now.date() - timedelta(days=1)


def _at_send_hour(day):
    return timezone.make_aware(datetime.combine(day, time(hour=settings.DIGEST_SEND_HOUR)))


def next_run_at(now=None):
    now = timezone.localtime(now or timezone.now())
    return _at_send_hour(now.date() + timedelta(days=1))


def first_run_at(now=None):
    now = timezone.localtime(now or timezone.now())
    return _at_send_hour(now.date())


# ============================================================
#                       QUERIES
# ============================================================

def candidate_project_ids(day):
    return list(
        DigestEvent.objects.filter(when=day)
        .order_by("project_id")
        .values_list("project_id", flat=True)
        .distinct()
    )


def subscribed_users(project_ids):
    User = get_user_model()
    return (
        User.objects.filter(profile__digests__in=project_ids)
        .exclude(email_settings__daily_digest=False)
        .distinct()
        .order_by("pk")
    )


def build_project_digest(project, day):
    digest = ProjectDigest(project=project)
    for bucket, types in BUCKETS.items():
        events = DigestEvent.objects.filter(
            project=project,
            type__in=types,
            when=day
        ).select_related("author").order_by("created_at", "pk")
        setattr(digest, bucket, list(events))
    return digest


def build_user_digests(user, day):
    """Non-empty project digests for every project the user follows and may read."""
    profile = getattr(user, "profile", None)
    if profile is None:
        return []

    digests = []
    for project_id in profile.digests.order_by("pk").values_list("pk", flat=True):
        project = find_project_for_user(project_id, user)
        if project is None:
            continue
        digest = build_project_digest(project, day)
        if digest.is_empty:
            continue
        digests.append(digest)
    return digests


# ============================================================
#                       RUN
# ============================================================

def run_daily_digest(scheduler, now=None):
    """Email yesterday's activity to every subscribed user, then schedule tomorrow's run."""
    now = now or timezone.now()
    day = digest_day(now)
    date_label = day.strftime("%d/%m/%Y")

    project_ids = candidate_project_ids(day)
    users = subscribed_users(project_ids)
    digest_logger.info(f"Digest for {date_label}: {len(project_ids)} projects with activity")

    email_data = build_email_data(
        template=settings.DIGEST_EMAIL_TEMPLATE,
        subject=f"Rapport du {date_label}"
    )
    email_settings_url = absolute_url(settings.EMAIL_SETTINGS_PATH)

    matched = sent = failed = 0
    for user in users:
        matched += 1
        digests = build_user_digests(user, day)
        if not digests:
            continue
        if not user.email:
            digest_logger.warning(f"User {user.pk} has digests but no email address, skipping")
            continue
        if send_email(user, digests, date_label, email_data, email_settings_url):
            sent += 1
        else:
            failed += 1

    next_run = next_run_at(now)
    scheduler.schedule(JOB_NAME, date=next_run)
    scheduler.mark_success(JOB_NAME)

    digest_logger.info(
        f"Digest for {date_label} done: {sent} sent, {failed} failed, "
        f"{matched} users matched. Next run {next_run.isoformat()}"
    )
    return {
        "day": day.isoformat(),
        "projects": len(project_ids),
        "users": matched,
        "emails_sent": sent,
        "emails_failed": failed,
        "next_run": next_run.isoformat(),
    }


def schedule_first_run(scheduler, now=None):
    """Register today's run at the send hour unless one is already pending."""
    return scheduler.schedule(JOB_NAME, date=first_run_at(now), singular=True)
