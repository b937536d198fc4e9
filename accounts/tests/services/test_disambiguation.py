from django.test import SimpleTestCase

from accounts.exceptions import InvalidChoice
from accounts.services.candidates import CandidateSet
from accounts.services.disambiguation import DisambiguationStep
from accounts.services.tokens import account_token
from accounts.tests.helpers import make_account


class DisambiguationStepTests(SimpleTestCase):
    def setUp(self):
        # "bob" is the username of A and the email of B.
        self.a = make_account(1, "bob", "a@example.com")
        self.b = make_account(2, "bobby", "bob")
        self.candidates = CandidateSet([self.b, self.a], secret="s")
        self.step = DisambiguationStep()

    def test_present_labels_email_and_username_matches(self):
        choice = self.step.present(self.candidates, "bob")
        labels = dict(choice.options)
        self.assertEqual(labels[account_token(2, secret="s")], "The account with the email address: bob")
        self.assertEqual(labels[account_token(1, secret="s")], "The account with the username: bob")

    def test_present_keeps_resolution_order_and_defaults_to_first(self):
        choice = self.step.present(self.candidates, "bob")
        self.assertEqual([token for token, _ in choice.options], [account_token(2, secret="s"), account_token(1, secret="s")])
        self.assertEqual(choice.initial, account_token(2, secret="s"))

    def test_present_compares_email_case_insensitively(self):
        a = make_account(1, "Carol@Example.com", "someone@example.com")
        b = make_account(2, "carol", "carol@example.com")
        choice = self.step.present(CandidateSet([b, a], secret="s"), "Carol@Example.com")
        labels = dict(choice.options)
        self.assertIn("email address", labels[account_token(2, secret="s")])
        self.assertIn("username", labels[account_token(1, secret="s")])

    def test_choose_round_trips_every_token(self):
        for token, account in self.candidates.items():
            with self.subTest(account=account.pk):
                self.assertIs(self.step.choose(self.candidates, token, "bob"), account)

    def test_choose_email_account(self):
        chosen = self.step.choose(self.candidates, account_token(2, secret="s"), "bob")
        self.assertIs(chosen, self.b)

    def test_choose_rejects_unknown_token(self):
        with self.assertRaises(InvalidChoice):
            self.step.choose(self.candidates, "tampered", "bob")

    def test_choose_rejects_token_made_with_another_salt(self):
        with self.assertRaises(InvalidChoice):
            self.step.choose(self.candidates, account_token(2, secret="other"), "bob")

    def test_choose_rejects_token_of_account_outside_the_set(self):
        with self.assertRaises(InvalidChoice):
            self.step.choose(self.candidates, account_token(3, secret="s"), "bob")

    def test_present_with_empty_set_has_no_default(self):
        choice = self.step.present(CandidateSet(secret="s"), "bob")
        self.assertEqual(choice.options, [])
        self.assertIsNone(choice.initial)
