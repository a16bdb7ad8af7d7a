"""List audit logs use case."""

from rolegate.application.dto.audit_log_page import AuditLogPage
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User
from rolegate.domain.exceptions import PermissionDenied

PAGE_SIZE = 20


class ListAuditLogsUseCase:
    """Paginated audit trail for administrators, newest first."""

    def __init__(
        self,
        unit_of_work_factory: type,
        policy: AccessPolicy = DEFAULT_POLICY,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._policy = policy
        self._page_size = page_size

    async def execute(self, actor: User, page: int = 1) -> AuditLogPage:
        """Return page (1-based, values below 1 read as 1). Actor must be admin."""
        if not self._policy.is_admin(actor.role):
            raise PermissionDenied("Only administrators can read audit logs")

        page = max(page, 1)
        async with self._uow_factory() as uow:
            items, total = await uow.audit_logs.list_recent(
                offset=(page - 1) * self._page_size,
                limit=self._page_size,
            )
        return AuditLogPage(items=items, page=page, page_size=self._page_size, total=total)
