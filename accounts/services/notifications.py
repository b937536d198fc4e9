"""Send password reset emails carrying a one-time link."""

import enum
import logging
import smtplib

from django.conf import settings
from django.contrib.auth.tokens import default_token_generator
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.urls import reverse
from django.utils import translation
from django.utils.encoding import force_bytes
from django.utils.http import urlsafe_base64_encode

logger = logging.getLogger(__name__)

SUBJECT_TEMPLATE = "emails/password_reset_subject.txt"
BODY_TEMPLATE = "emails/password_reset_body.txt"


class DeliveryStatus(enum.Enum):
    SENT = "sent"
    FAILED = "failed"


def django_reset_link(account):
    """Build an absolute password_reset_confirm link using Django's token generator."""
    uidb64 = urlsafe_base64_encode(force_bytes(account.pk))
    token = default_token_generator.make_token(account)
    path = reverse("password_reset_confirm", kwargs={"uidb64": uidb64, "token": token})
    return settings.SITE_URL.rstrip("/") + path


class NotificationService:
    """Render and send account emails in the recipient's language."""

    def __init__(self, link_backend=None, from_email=None):
        self.link_backend = link_backend or django_reset_link
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send_password_reset(self, account, language_code):
        """Mail a one-time reset link to ``account``; return the delivery status."""
        link = self.link_backend(account)
        if not link:
            logger.warning("No password reset link available for account %s", account.pk)
            return DeliveryStatus.FAILED

        context = {"account": account, "reset_link": link, "site_url": settings.SITE_URL}
        with translation.override(language_code):
            subject = "".join(render_to_string(SUBJECT_TEMPLATE, context).splitlines())
            body = render_to_string(BODY_TEMPLATE, context)

        try:
            send_mail(
                subject=subject,
                message=body,
                from_email=self.from_email,
                recipient_list=[account.email],
                fail_silently=False,
            )
        except (smtplib.SMTPException, OSError):
            logger.exception("Error sending password reset email to account %s", account.pk)
            return DeliveryStatus.FAILED
        return DeliveryStatus.SENT
