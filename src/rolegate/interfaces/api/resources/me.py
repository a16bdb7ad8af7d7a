"""Current user resource."""

import falcon.asgi

from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User


def user_to_media(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "full_name": user.full_name,
        "role": user.role.value,
        "is_active": user.is_active,
        "can_schedule_meetings": user.can_schedule_meetings,
    }


class MeResource:
    """GET /v1/me - signed-in user and their dashboard path."""

    def __init__(self, policy: AccessPolicy = DEFAULT_POLICY) -> None:
        self._policy = policy

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        media = user_to_media(user)
        media["home"] = self._policy.home_path(user.role)
        media["is_admin"] = self._policy.is_admin(user.role)
        media["is_associate_or_higher"] = self._policy.is_associate_or_higher(user.role)
        resp.media = media
        resp.status = falcon.HTTP_200
