"""Audit log entity - record of a privileged action."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class AuditLog:
    """AuditLog - who did what to which resource."""

    id: UUID
    user_id: str
    action_type: str
    resource_type: str
    resource_id: str
    created_at: datetime
    details: dict[str, Any] = field(default_factory=dict)
    user_full_name: str | None = None
    user_email: str | None = None
