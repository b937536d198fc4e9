from django.core.management.base import BaseCommand
from django.db import transaction
from accounts.models import AuditEntry, User

class Command(BaseCommand):
    """
    Management command to remove seeded accounts from the database.

    Deletes every non-staff account together with the audit trail, keeping
    administrative accounts so the admin site stays usable.
    """

    help = 'Removes seeded demo accounts'

    def handle(self, *args, **options):
        """Delete non-staff accounts and audit entries."""
        with transaction.atomic():
            deleted, _ = User.objects.filter(is_staff=False).delete()
            AuditEntry.objects.all().delete()
        self.stdout.write(self.style.SUCCESS(f"Removed {deleted} seeded records"))
