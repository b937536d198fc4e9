"""Persisted audit trail for account events."""

from django.db import models


class AuditEntry(models.Model):
    """One recorded account event, e.g. password reset instructions mailed."""

    event = models.CharField(max_length=64, db_index=True)
    fields = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'audit entries'

    def __str__(self):
        return f'{self.event} @ {self.created_at:%Y-%m-%d %H:%M}'
