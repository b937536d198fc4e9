from .password_reset_form import ChooseAccountForm, PasswordResetRequestForm

__all__ = [
    "ChooseAccountForm",
    "PasswordResetRequestForm",
]
