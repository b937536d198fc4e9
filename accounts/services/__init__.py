from .candidates import CandidateSet
from .resolver import AccountResolver
from .disambiguation import Choice, DisambiguationStep
from .notifications import DeliveryStatus, NotificationService
from .audit import AuditLog
from .dispatcher import ResetDispatcher
from .workflow import PasswordResetWorkflow, Step, Transition, WorkflowState
from .flow_storage import FlowStorage

__all__ = [
    "CandidateSet",
    "AccountResolver",
    "Choice",
    "DisambiguationStep",
    "DeliveryStatus",
    "NotificationService",
    "AuditLog",
    "ResetDispatcher",
    "PasswordResetWorkflow",
    "Step",
    "Transition",
    "WorkflowState",
    "FlowStorage",
]
