"""Hand a resolved account to the notification service."""

from django.utils import translation

from accounts.exceptions import DispatchFailed
from accounts.services.notifications import DeliveryStatus

AUDIT_EVENT = "password_reset_mailed"


class ResetDispatcher:
    """Request a password reset email for one account and audit the result.

    Failures are raised as DispatchFailed; retrying is left to the
    notification service.
    """

    def __init__(self, notifications, audit_log, language_provider=translation.get_language):
        self.notifications = notifications
        self.audit_log = audit_log
        self.language_provider = language_provider

    def language_for(self, account):
        return getattr(account, "preferred_language", "") or self.language_provider()

    def dispatch(self, account):
        status = self.notifications.send_password_reset(account, self.language_for(account))
        if status is not DeliveryStatus.SENT:
            raise DispatchFailed(account)
        self.audit_log.record(AUDIT_EVENT, {"name": account.get_username(), "email": account.email})
        return status
