from .user import User
from .audit_entry import AuditEntry

__all__ = [
    "User",
    "AuditEntry",
]
