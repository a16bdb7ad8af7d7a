"""Repository ports."""

from rolegate.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from rolegate.application.ports.repositories.project_repository import (
    ProjectRepository,
)
from rolegate.application.ports.repositories.task_repository import TaskRepository
from rolegate.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuditLogRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
