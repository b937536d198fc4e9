"""Ordered set of accounts matched while resolving a reset request."""

from accounts.services.tokens import account_token


class CandidateSet:
    """Ordered mapping of stable token to account.

    Accounts keep their insertion order (email match first, then username
    match). Adding an account that is already present is a no-op.
    """

    MAX_SIZE = 2

    def __init__(self, accounts=(), secret=None):
        self._secret = secret
        self._accounts = {}
        for account in accounts:
            self.add(account)

    def add(self, account):
        """Add an account unless one with the same pk is already present."""
        if account is None or self.contains(account):
            return
        if len(self._accounts) >= self.MAX_SIZE:
            raise ValueError(f"A candidate set holds at most {self.MAX_SIZE} accounts")
        self._accounts[self.token_for(account)] = account

    def token_for(self, account):
        return account_token(account.pk, secret=self._secret)

    def contains(self, account):
        return any(existing.pk == account.pk for existing in self._accounts.values())

    def get(self, token):
        return self._accounts.get(token)

    def first(self):
        return next(iter(self._accounts.values()), None)

    def items(self):
        return list(self._accounts.items())

    def account_ids(self):
        return [account.pk for account in self._accounts.values()]

    def __len__(self):
        return len(self._accounts)

    def __iter__(self):
        return iter(self._accounts.values())

    def __bool__(self):
        return bool(self._accounts)

    def __repr__(self):
        return f"CandidateSet({self.account_ids()!r})"
