"""Unit tests of the password reset forms."""
from django import forms
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase

from accounts.forms import ChooseAccountForm, PasswordResetRequestForm
from accounts.services.disambiguation import Choice
from accounts.tests.helpers import make_user


class PasswordResetRequestFormTestCase(TestCase):

    def test_form_contains_name_field(self):
        form = PasswordResetRequestForm()
        self.assertIn('name', form.fields)
        self.assertEqual(form.fields['name'].max_length, 254)
        self.assertEqual(form.fields['name'].widget.attrs['autocapitalize'], 'off')

    def test_form_rejects_blank_name(self):
        form = PasswordResetRequestForm(data={'name': ''})
        self.assertFalse(form.is_valid())

    def test_form_accepts_unknown_name(self):
        form = PasswordResetRequestForm(data={'name': 'nosuchuser'})
        self.assertTrue(form.is_valid())

    def test_form_strips_name(self):
        form = PasswordResetRequestForm(data={'name': '  alice  '}, user=AnonymousUser())
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data['name'], 'alice')

    def test_signed_in_user_resets_own_email(self):
        user = make_user(username='alice', email='alice@example.org')
        form = PasswordResetRequestForm(data={'name': 'someone-else'}, user=user)
        self.assertTrue(isinstance(form.fields['name'].widget, forms.HiddenInput))
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data['name'], 'alice@example.org')

    def test_signed_in_user_needs_no_input(self):
        user = make_user(username='alice', email='alice@example.org')
        form = PasswordResetRequestForm(data={}, user=user)
        self.assertTrue(form.is_valid())


class ChooseAccountFormTestCase(TestCase):
    def setUp(self):
        self.choice = Choice(
            options=[('tok-email', 'The account with the email address: bob@example.org'),
                     ('tok-name', 'The account with the username: bob@example.org')],
            initial='tok-email',
        )

    def test_form_renders_radio_options_with_default(self):
        form = ChooseAccountForm(choice=self.choice)
        field = form.fields['choose_account']
        self.assertTrue(isinstance(field.widget, forms.RadioSelect))
        self.assertEqual(list(field.choices), self.choice.options)
        self.assertEqual(field.initial, 'tok-email')

    def test_form_accepts_offered_token(self):
        form = ChooseAccountForm(data={'choose_account': 'tok-name'}, choice=self.choice)
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data['choose_account'], 'tok-name')

    def test_form_rejects_unknown_token(self):
        form = ChooseAccountForm(data={'choose_account': 'forged'}, choice=self.choice)
        self.assertFalse(form.is_valid())

    def test_form_requires_a_choice(self):
        form = ChooseAccountForm(data={}, choice=self.choice)
        self.assertFalse(form.is_valid())
