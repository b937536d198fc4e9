"""Repository helpers for account lookups."""

from typing import Iterable, List, Optional

from accounts.db_accessor import DB_Accessor
from accounts.models.user import User


class UserRepo(DB_Accessor):
    """Account store used by the password reset flow.

    Every finder only returns active accounts; blocked accounts are never
    candidates for a reset.
    """
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def find_active_by_email(self, email: str) -> Optional[User]:
        """Return the active account with this email (case-insensitive) or None."""
        return self.first(email__iexact=email, is_active=True)

    def find_active_by_username(self, username: str) -> Optional[User]:
        """Return the active account with this username or None."""
        return self.first(username=username, is_active=True)

    def find_active_by_ids(self, user_ids: Iterable[int]) -> List[User]:
        """Return active accounts for the given ids, keeping their order."""
        return self.in_order(user_ids, is_active=True)
