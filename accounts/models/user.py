"""Custom user model carrying the account's preferred language."""

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models

USERNAME_MAX_LENGTH = 60


class User(AbstractUser):
    """Model for user auth. Inactive accounts count as blocked."""

    username = models.CharField(
        max_length=USERNAME_MAX_LENGTH,
        unique=True,
        validators=[AbstractUser.username_validator],
    )
    email = models.EmailField(unique=True, blank=False)
    preferred_language = models.CharField(
        max_length=12,
        blank=True,
        choices=settings.LANGUAGES,
        help_text="language used for account emails; blank follows the site language",
    )

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

