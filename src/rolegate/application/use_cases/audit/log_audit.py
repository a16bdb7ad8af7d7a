"""Log audit use case - record a privileged action after it succeeds."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from rolegate.domain.entities import AuditLog, User


class LogAuditUseCase:
    """Insert an audit entry attributed to the acting user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor: User | None,
        action_type: str,
        resource_type: str,
        resource_id: str,
        details: dict[str, Any] | None = None,
    ) -> AuditLog | None:
        """Write the entry. Without an actor nothing is written and None is returned."""
        if actor is None:
            return None

        entry = AuditLog(
            id=uuid4(),
            user_id=actor.id,
            action_type=action_type,
            resource_type=resource_type,
            resource_id=resource_id,
            details=details or {},
            created_at=datetime.now(UTC),
        )
        async with self._uow_factory() as uow:
            await uow.audit_logs.create(entry)
        return entry
