from django.conf import settings
from django.db import models
from django.utils import timezone
from projects.models import Project


class DigestEvent(models.Model):
    CREATE = "tasks.create"
    COMPLETE = "tasks.complete"
    UNCOMPLETE = "tasks.uncomplete"
    UPDATE = "tasks.update"
    REMOVE = "tasks.remove"
    DELETE_FOREVER = "tasks.deleteForever"

    TYPE_CHOICES = [
        (CREATE, "Task created"),
        (COMPLETE, "Task completed"),
        (UNCOMPLETE, "Task reopened"),
        (UPDATE, "Task updated"),
        (REMOVE, "Task removed"),
        (DELETE_FOREVER, "Task deleted forever"),
    ]

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="digest_events"
    )
    type = models.CharField(max_length=32, choices=TYPE_CHOICES)
    # calendar day the change belongs to, in the site's time zone
    when = models.DateField(db_index=True)

    task_name = models.CharField(max_length=500, blank=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name="digest_events"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=["project", "when", "type"], name="digest_project_day_type_idx")]

    def __str__(self):
        return f"{self.project} | {self.type} | {self.when}"


def record_event(project, type, task_name="", author=None, at=None):
    """Store one task change, attributed to the local calendar day of ``at``."""
    at = at or timezone.now()
    return DigestEvent.objects.create(
        project=project,
        type=type,
        when=timezone.localtime(at).date(),
        task_name=task_name,
        author=author,
    )
