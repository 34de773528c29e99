from datetime import date, datetime
from unittest.mock import MagicMock

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.utils import timezone

from accounts.models import EmailSettings, Profile
from digests.models import DigestEvent
from projects.models import Project

# A run at NOW reports on DAY
NOW = datetime(2024, 3, 15, 10, 30)
DAY = date(2024, 3, 14)


@pytest.fixture
def now():
    return timezone.make_aware(NOW)


@pytest.fixture
def day():
    return DAY


@pytest.fixture
def scheduler():
    """Stand-in for CeleryBeatScheduler recording schedule/mark_success calls."""
    return MagicMock()


@pytest.fixture
def make_user(db):
    def _make(username, email=None, admin=False, admin_group=False,
              subscriptions=(), daily_digest=None, profile=True):
        user = get_user_model().objects.create_user(
            username=username,
            email=f"{username}@example.com" if email is None else email,
            password="not-used",
        )
        if admin:
            user.is_superuser = True
            user.save()
        if admin_group:
            group, _ = Group.objects.get_or_create(name="admin")
            user.groups.add(group)
        if profile:
            Profile.objects.create(user=user).digests.set(subscriptions)
        if daily_digest is not None:
            EmailSettings.objects.create(user=user, daily_digest=daily_digest)
        return user
    return _make


@pytest.fixture
def make_project(db):
    def _make(name, members=()):
        project = Project.objects.create(name=name)
        project.members.set(members)
        return project
    return _make


@pytest.fixture
def make_event(db):
    def _make(project, type=DigestEvent.CREATE, when=DAY, task_name="Task", author=None):
        return DigestEvent.objects.create(
            project=project, type=type, when=when, task_name=task_name, author=author
        )
    return _make
