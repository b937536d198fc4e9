"""Opaque, salt-derived tokens identifying accounts on the choice step."""

import base64

from django.conf import settings
from django.utils.crypto import salted_hmac

KEY_SALT = "accounts.services.tokens.account_choice"


def account_token(account_id, secret=None):
    """Return the stable token for an account id.

    The token is a keyed SHA-256 HMAC of the id, base64url encoded without
    padding. It is safe to echo to the client and cannot be mapped back to
    the id without the secret.
    """
    if secret is None:
        secret = settings.PASSWORD_RESET_HASH_SALT
    digest = salted_hmac(KEY_SALT, str(account_id), secret=secret, algorithm="sha256").digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
