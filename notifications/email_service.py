from dataclasses import dataclass
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from core.utils import get_file_logger
from notifications.text import html_to_text

email_logger = get_file_logger("email_service", "email_service.log")


# ============================================================
#                       EMAIL DATA
# ============================================================

@dataclass
class EmailData:
    subject: str
    template: str

    def render_html(self, user, digests, date, email_settings_url):
        return render_to_string(self.template, {
            "user": user,
            "digests": digests,
            "date": date,
            "email_settings_url": email_settings_url,
        })


def build_email_data(template, subject):
    return EmailData(subject=subject, template=template)


# ============================================================
#                       SEND EMAIL
# ============================================================

def send_email(user, digests, date, email_data, email_settings_url):
    """Render the digest for one user and send it.

    Rendering errors propagate. A transport failure is logged and reported
    as False so the caller can carry on with the next user.
    """
    html_body = email_data.render_html(user, digests, date, email_settings_url)
    text_body = html_to_text(html_body)

    try:
        email = EmailMultiAlternatives(
            email_data.subject,
            text_body,
            settings.DEFAULT_FROM_EMAIL,
            [user.email]
        )
        email.attach_alternative(html_body, "text/html")
        email.send()
    except Exception:
        email_logger.exception(f"❌ Failed to send digest to {user.email}")
        return False

    email_logger.info(f"✅ Sent digest to {user.email}. Projects: {len(digests)}")
    return True
