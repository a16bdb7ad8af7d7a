"""Audit log listing DTO."""

from dataclasses import dataclass

from rolegate.domain.entities import AuditLog


@dataclass
class AuditLogPage:
    """One page of audit logs, newest first."""

    items: list[AuditLog]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)
