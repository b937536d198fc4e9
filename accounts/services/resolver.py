"""Resolve a username-or-email to the accounts it could refer to."""

import logging

from accounts.exceptions import AccountNotFound
from accounts.services.candidates import CandidateSet

logger = logging.getLogger(__name__)


class AccountResolver:
    """Find candidate accounts for a password reset request.

    The email lookup always runs. The username lookup runs only for
    anonymous requests; a signed-in requester is never matched against
    other accounts by username.
    """

    def __init__(self, account_store, secret=None):
        self.account_store = account_store
        self.secret = secret

    def resolve(self, name, is_authenticated):
        """Return a CandidateSet for ``name`` or raise AccountNotFound."""
        name = (name or "").strip()
        candidates = CandidateSet(secret=self.secret)
        if name:
            candidates.add(self.account_store.find_active_by_email(name))
            if not is_authenticated:
                candidates.add(self.account_store.find_active_by_username(name))
        if not candidates:
            logger.debug("Password reset requested for an unrecognised name")
            raise AccountNotFound(name)
        return candidates
