"""Management command to seed the database with demo accounts for the reset flow."""

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import User


class Command(BaseCommand):
    """Seed random accounts plus the fixed accounts that exercise every reset branch."""
    USER_COUNT = 20
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with demo accounts'

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=self.USER_COUNT,
            help="Number of accounts to have after seeding, fixed ones included.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        with transaction.atomic():
            self.create_fixed_accounts()
            self.create_random_accounts(options["count"])
        self.stdout.write(self.style.SUCCESS(f"Seeding complete: {User.objects.count()} accounts"))

    def create_fixed_accounts(self):
        """Create a plain account, a username/email collision pair and a blocked account."""
        # "bob@example.org" is the username of one account and the email of another,
        # so resetting "bob@example.org" asks which account is meant.
        self.try_create_user(username="alice", email="alice@example.org")
        self.try_create_user(username="bob@example.org", email="robert@example.org")
        self.try_create_user(username="bobby", email="bob@example.org", preferred_language="fr")
        self.try_create_user(username="mallory", email="mallory@example.org", is_active=False)

    def create_random_accounts(self, count):
        """Create random accounts until ``count`` is reached."""
        while User.objects.count() < count:
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            username = f"{first_name}.{last_name}{self.faker.random_int(1, 999)}".lower()
            self.try_create_user(
                username=username,
                email=f"{username}@example.org",
                first_name=first_name,
                last_name=last_name,
            )

    def try_create_user(self, **data):
        """Create a user unless the username or email is already taken."""
        if User.objects.filter(username=data["username"]).exists():
            return None
        if User.objects.filter(email__iexact=data["email"]).exists():
            return None
        return User.objects.create_user(password=self.DEFAULT_PASSWORD, **data)
