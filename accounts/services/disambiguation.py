"""Let the requester pick between an email match and a username match."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from django.utils.translation import gettext as _

from accounts.exceptions import InvalidChoice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Choice:
    """Options to render on the choice step: (token, label) pairs plus the default token."""
    options: List[Tuple[str, str]]
    initial: Optional[str]


def _same_email(account, name):
    return (account.email or "").casefold() == (name or "").casefold()


class DisambiguationStep:
    """Map candidates to labelled tokens and a submitted token back to an account."""

    def present(self, candidates, submitted_name):
        """Return the labelled choice for a two-account candidate set."""
        options = []
        for token, account in candidates.items():
            if _same_email(account, submitted_name):
                label = _("The account with the email address: %(email)s") % {"email": account.email}
            else:
                label = _("The account with the username: %(name)s") % {"name": account.get_username()}
            options.append((token, label))
        return Choice(options=options, initial=options[0][0] if options else None)

    def choose(self, candidates, chosen_token, submitted_name=None):
        """Return the candidate whose token equals ``chosen_token``.

        Candidates are keyed by tokens computed from the stored accounts,
        so a tampered or stale value never matches.
        """
        account = candidates.get(chosen_token)
        if account is None:
            logger.warning("Password reset choice did not match any stored candidate")
            raise InvalidChoice("The selected account is not valid for this request.")
