from datetime import datetime
from datetime import timezone as dt_timezone

from digests.models import DigestEvent, record_event


def test_record_event_uses_local_calendar_day(make_project, make_user, settings):
    settings.TIME_ZONE = "Europe/Paris"
    project = make_project("P1")
    author = make_user("alice")

    # 23:30 UTC on the 14th is the 15th in Paris
    event = record_event(project, DigestEvent.COMPLETE, task_name="Ship it", author=author,
                         at=datetime(2024, 3, 14, 23, 30, tzinfo=dt_timezone.utc))

    event.refresh_from_db()
    assert event.when.isoformat() == "2024-03-15"
    assert event.type == "tasks.complete"
    assert event.author == author
    assert event.task_name == "Ship it"


def test_deleting_author_keeps_event(make_project, make_user):
    author = make_user("alice")
    event = record_event(make_project("P1"), DigestEvent.CREATE, task_name="x", author=author)

    author.delete()
    event.refresh_from_db()

    assert event.author is None
