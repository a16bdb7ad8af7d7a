"""Audit log repository port."""

from typing import Protocol

from rolegate.domain.entities import AuditLog


class AuditLogRepository(Protocol):
    """Port for audit log persistence."""

    async def create(self, entry: AuditLog) -> AuditLog: ...

    async def list_recent(self, *, offset: int, limit: int) -> tuple[list[AuditLog], int]:
        """Newest entries first, plus the total row count."""
        ...
