"""Audit trail for account events."""

import logging

from accounts.models import AuditEntry

logger = logging.getLogger(__name__)


class AuditLog:
    """Record account events as AuditEntry rows and log lines."""

    def __init__(self, entry_model=AuditEntry):
        self.entry_model = entry_model

    def record(self, event, fields):
        """Persist ``event`` with its ``fields`` and return the entry."""
        entry = self.entry_model.objects.create(event=event, fields=dict(fields))
        logger.info("%s %s", event, " ".join(f"{k}={v}" for k, v in fields.items()))
        return entry
