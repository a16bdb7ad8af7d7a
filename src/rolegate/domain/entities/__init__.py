"""Domain entities."""

from rolegate.domain.entities.audit_log import AuditLog
from rolegate.domain.entities.task import Task
from rolegate.domain.entities.user import User

__all__ = [
    "AuditLog",
    "Task",
    "User",
]
