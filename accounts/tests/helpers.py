import uuid

from accounts.models import User


def make_user(**kwargs):
    """Create and return an active user; username and email default to unique values."""
    username = kwargs.pop("username", f"user_{uuid.uuid4().hex[:6]}")
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )


def make_account(pk, username, email, **kwargs):
    """Return an unsaved user with a fixed pk, for tests that never touch the database."""
    return User(id=pk, username=username, email=email, **kwargs)
