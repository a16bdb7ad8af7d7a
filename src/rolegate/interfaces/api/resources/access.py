"""Access resources - route decisions and project/task access checks."""

import falcon.asgi

from rolegate.application.use_cases.access.authorize_route import AuthorizeRouteUseCase
from rolegate.application.use_cases.access.check_project_access import (
    CheckProjectAccessUseCase,
)
from rolegate.application.use_cases.access.check_task_access import CheckTaskAccessUseCase
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy


class AccessResource:
    """GET /v1/access?path=... - required role and guard decision for a page path."""

    def __init__(
        self,
        authorize_route: AuthorizeRouteUseCase,
        policy: AccessPolicy = DEFAULT_POLICY,
    ) -> None:
        self._authorize = authorize_route
        self._policy = policy

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        path = req.get_param("path", default="")
        user = getattr(req.context, "user", None)
        required = self._policy.get_required_role(path)
        decision = self._authorize.execute(path, user)
        resp.media = {
            "path": path,
            "required_role": required.value if required else None,
            "allowed": decision.allowed,
            "redirect_to": decision.redirect_to,
        }
        resp.status = falcon.HTTP_200


class ProjectAccessResource:
    """GET /v1/projects/{project_id}/access."""

    def __init__(self, check_project_access: CheckProjectAccessUseCase) -> None:
        self._check = check_project_access

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        project_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = {"allowed": await self._check.execute(user.id, project_id)}
        resp.status = falcon.HTTP_200


class TaskAccessResource:
    """GET /v1/tasks/{task_id}/access."""

    def __init__(self, check_task_access: CheckTaskAccessUseCase) -> None:
        self._check = check_task_access

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        task_id: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = {"allowed": await self._check.execute(user.id, task_id)}
        resp.status = falcon.HTTP_200
