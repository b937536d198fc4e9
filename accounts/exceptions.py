"""Errors raised by the password reset flow."""


class PasswordResetError(Exception):
    """Base class for recoverable password reset errors."""


class AccountNotFound(PasswordResetError):
    """The submitted name matches no active account."""

    def __init__(self, name):
        super().__init__(f"No active account matches {name!r}")
        self.name = name


class InvalidChoice(PasswordResetError):
    """The chosen token matches none of the stored candidates."""


class DispatchFailed(PasswordResetError):
    """The notification collaborator could not send the reset email."""

    def __init__(self, account):
        super().__init__(f"Password reset email could not be sent to account {account.pk}")
        self.account = account


class InvalidTransition(PasswordResetError):
    """An action was submitted in a workflow step that does not accept it."""

    def __init__(self, step, action):
        super().__init__(f"Action {action!r} is not allowed in step {step.value!r}")
        self.step = step
        self.action = action
