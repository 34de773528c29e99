from django.conf import settings
from django.db import models
from projects.models import Project


class Profile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile"
    )
    # projects whose daily digest the user follows
    digests = models.ManyToManyField(
        Project,
        blank=True,
        related_name="digest_subscribers"
    )

    def __str__(self):
        return f"Profile | {self.user}"


class EmailSettings(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="email_settings"
    )
    daily_digest = models.BooleanField(
        default=True,
        help_text="Only an explicit False opts the user out of the daily digest"
    )

    def __str__(self):
        return f"Email settings | {self.user} | daily digest: {self.daily_digest}"
