import smtplib
from unittest.mock import MagicMock, patch

from django.contrib.auth.tokens import default_token_generator
from django.core import mail
from django.test import TestCase, override_settings
from django.utils.encoding import force_str
from django.utils.http import urlsafe_base64_decode

from accounts.services.notifications import (
    DeliveryStatus,
    NotificationService,
    django_reset_link,
)
from accounts.tests.helpers import make_user


@override_settings(
    EMAIL_BACKEND="django.core.mail.backends.locmem.EmailBackend",
    DEFAULT_FROM_EMAIL="noreply@test.com",
    SITE_URL="https://accounts.example.org/",
)
class NotificationServiceTests(TestCase):
    def setUp(self):
        self.user = make_user(username="alice", email="alice@example.org")

    def test_django_reset_link_points_at_confirm_view(self):
        link = django_reset_link(self.user)
        self.assertTrue(link.startswith("https://accounts.example.org/reset/"))
        uidb64, token = link.rstrip("/").split("/")[-2:]
        self.assertEqual(force_str(urlsafe_base64_decode(uidb64)), str(self.user.pk))
        self.assertTrue(default_token_generator.check_token(self.user, token))

    def test_send_password_reset_mails_link(self):
        service = NotificationService(link_backend=lambda account: "https://example.org/one-time")
        status = service.send_password_reset(self.user, "en")
        self.assertIs(status, DeliveryStatus.SENT)
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ["alice@example.org"])
        self.assertEqual(message.from_email, "noreply@test.com")
        self.assertIn("alice", message.subject)
        self.assertNotIn("\n", message.subject)
        self.assertIn("https://example.org/one-time", message.body)

    def test_send_password_reset_with_default_backend(self):
        status = NotificationService().send_password_reset(self.user, "en")
        self.assertIs(status, DeliveryStatus.SENT)
        self.assertIn("https://accounts.example.org/reset/", mail.outbox[0].body)

    def test_missing_link_fails_without_mail(self):
        service = NotificationService(link_backend=lambda account: None)
        self.assertIs(service.send_password_reset(self.user, "en"), DeliveryStatus.FAILED)
        self.assertEqual(len(mail.outbox), 0)

    def test_transport_error_fails(self):
        service = NotificationService(link_backend=lambda account: "https://example.org/x")
        with patch("accounts.services.notifications.send_mail", side_effect=smtplib.SMTPException("down")):
            self.assertIs(service.send_password_reset(self.user, "en"), DeliveryStatus.FAILED)

    def test_renders_in_requested_language(self):
        service = NotificationService(link_backend=lambda account: "https://example.org/x")
        with patch("django.utils.translation.override", MagicMock()) as override:
            service.send_password_reset(self.user, "fr")
        override.assert_called_once_with("fr")

    def test_default_link_backend_is_django_token_link(self):
        self.assertIs(NotificationService().link_backend, django_reset_link)
