from django import forms
from django.utils.translation import gettext_lazy as _

from accounts.models.user import USERNAME_MAX_LENGTH

EMAIL_MAX_LENGTH = 254


class PasswordResetRequestForm(forms.Form):
    """
    Collect a username or email address to start a password reset flow.

    Whether the name belongs to an account is decided by the resolver in the
    view, not by this form.
    """

    name = forms.CharField(
        label=_("Username or email address"),
        max_length=max(USERNAME_MAX_LENGTH, EMAIL_MAX_LENGTH),
        widget=forms.TextInput(attrs={
            "autocorrect": "off",
            "autocapitalize": "off",
            "spellcheck": "false",
            "autofocus": "autofocus",
        }),
    )

    def __init__(self, *args, user=None, **kwargs):
        """Signed-in users reset their own account, so the name is their email."""
        super().__init__(*args, **kwargs)
        self.user = user
        if self.for_signed_in_user:
            self.fields["name"].required = False
            self.fields["name"].widget = forms.HiddenInput()

    @property
    def for_signed_in_user(self):
        return self.user is not None and self.user.is_authenticated

    def clean_name(self):
        if self.for_signed_in_user:
            return self.user.email
        return self.cleaned_data["name"].strip()


class ChooseAccountForm(forms.Form):
    """Pick which of two conflicting accounts should receive the reset email."""

    choose_account = forms.ChoiceField(
        label=_("Choose account"),
        widget=forms.RadioSelect,
    )

    def __init__(self, *args, choice, **kwargs):
        """Build the radio options from a disambiguation Choice."""
        super().__init__(*args, **kwargs)
        self.fields["choose_account"].choices = choice.options
        self.fields["choose_account"].initial = choice.initial
