from smtplib import SMTPException
from unittest.mock import patch

from django.core import mail
from django.core.mail import EmailMultiAlternatives

from digests.dispatcher import ProjectDigest
from notifications.email_service import EmailData, build_email_data, send_email


def _digests(make_project, make_event):
    project = make_project("Alpha")
    event = make_event(project, task_name="Ship release")
    return [ProjectDigest(project=project, created=[event])]


def test_build_email_data():
    data = build_email_data(template="digests/email/digest.html", subject="Rapport du 14/03/2024")
    assert data == EmailData(subject="Rapport du 14/03/2024", template="digests/email/digest.html")


def test_render_html_uses_explicit_context(make_user, make_project, make_event):
    user = make_user("alice")
    data = build_email_data("digests/email/digest.html", "Rapport du 14/03/2024")

    html = data.render_html(user, _digests(make_project, make_event), "14/03/2024",
                            "https://board.example.com/settings/mail")

    assert "Rapport du 14/03/2024" in html
    assert "Alpha" in html
    assert "Ship release" in html
    assert 'href="https://board.example.com/settings/mail"' in html


def test_send_email_sends_html_and_text(make_user, make_project, make_event, settings):
    settings.DEFAULT_FROM_EMAIL = "digest@example.com"
    user = make_user("alice")
    data = build_email_data("digests/email/digest.html", "Rapport du 14/03/2024")

    assert send_email(user, _digests(make_project, make_event), "14/03/2024", data, "https://x/settings/mail")

    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.from_email == "digest@example.com"
    assert message.to == ["alice@example.com"]
    assert message.subject == "Rapport du 14/03/2024"
    assert "Ship release" in message.body
    assert message.alternatives[0][1] == "text/html"


def test_transport_failure_is_logged_and_swallowed(make_user, make_project, make_event, caplog):
    user = make_user("alice")
    data = build_email_data("digests/email/digest.html", "Rapport du 14/03/2024")

    with patch.object(EmailMultiAlternatives, "send", side_effect=SMTPException("refused")):
        sent = send_email(user, _digests(make_project, make_event), "14/03/2024", data, "https://x/settings/mail")

    assert sent is False
    assert "Failed to send digest to alice@example.com" in caplog.text
