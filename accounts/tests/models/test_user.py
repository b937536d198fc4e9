from django.test import TestCase

from accounts.models import AuditEntry, User
from accounts.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="alice", email="alice@example.org")

    def test_preferred_language_defaults_to_blank(self):
        self.assertEqual(self.user.preferred_language, "")

    def test_users_ordered_by_username(self):
        make_user(username="aaron", email="aaron@example.org")
        self.assertEqual(list(User.objects.values_list("username", flat=True)), ["aaron", "alice"])


class AuditEntryModelTestCase(TestCase):

    def test_str_includes_event(self):
        entry = AuditEntry.objects.create(event="password_reset_mailed", fields={"name": "alice"})
        self.assertIn("password_reset_mailed", str(entry))

    def test_newest_first(self):
        first = AuditEntry.objects.create(event="a")
        second = AuditEntry.objects.create(event="b")
        self.assertEqual(list(AuditEntry.objects.all()), [second, first])
