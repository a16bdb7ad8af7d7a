"""Audit log API resource."""

import falcon.asgi

from rolegate.application.use_cases.audit.list_audit_logs import ListAuditLogsUseCase
from rolegate.domain.exceptions import PermissionDenied


class AuditLogsResource:
    """GET /v1/audit-logs?page=N - admin audit trail."""

    def __init__(self, list_audit_logs: ListAuditLogsUseCase) -> None:
        self._list = list_audit_logs

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        page_num = req.get_param_as_int("page", default=1)
        try:
            page = await self._list.execute(user, page_num)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {
            "items": [
                {
                    "id": str(log.id),
                    "user_id": log.user_id,
                    "user": {"full_name": log.user_full_name, "email": log.user_email},
                    "action_type": log.action_type,
                    "resource_type": log.resource_type,
                    "resource_id": log.resource_id,
                    "details": log.details,
                    "created_at": log.created_at.isoformat(),
                }
                for log in page.items
            ],
            "page": page.page,
            "page_size": page.page_size,
            "total": page.total,
            "total_pages": page.total_pages,
        }
        resp.status = falcon.HTTP_200
