"""User administration API resources."""

import falcon.asgi

from rolegate.application.use_cases.users.set_meeting_permission import (
    SetMeetingPermissionUseCase,
)
from rolegate.application.use_cases.users.set_user_active import SetUserActiveUseCase
from rolegate.application.use_cases.users.update_user import UpdateUserUseCase
from rolegate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from rolegate.domain.value_objects import Role
from rolegate.interfaces.api.errors import success_response
from rolegate.interfaces.api.resources.me import user_to_media

ROLE_VALUES = tuple(r.value for r in Role)


async def _json_object(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> dict | None:
    """Request body as a JSON object, or None after writing a 400."""
    body = await req.get_media()
    if not isinstance(body, dict):
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Request body must be a JSON object"}
        return None
    return body


async def _bool_field(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, field: str
) -> bool | None:
    """Required boolean field of the body, or None after writing a 400."""
    body = await _json_object(req, resp)
    if body is None:
        return None
    if field not in body:
        resp.status = falcon.HTTP_400
        resp.media = {"error": f"Missing required field: {field}"}
        return None
    value = body[field]
    if not isinstance(value, bool):
        resp.status = falcon.HTTP_400
        resp.media = {"error": f"{field} must be a boolean"}
        return None
    return value


def _unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}


class UserResource:
    """PATCH /v1/users/{user_id} - update full name and/or role."""

    def __init__(self, update_user: UpdateUserUseCase) -> None:
        self._update = update_user

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            _unauthorized(resp)
            return

        body = await _json_object(req, resp)
        if body is None:
            return
        role = body.get("role")
        if role is not None and role not in ROLE_VALUES:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown role: {role}"}
            return
        full_name = body.get("full_name")
        if full_name is not None and not isinstance(full_name, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "full_name must be a string"}
            return

        try:
            user = await self._update.execute(
                actor,
                user_id,
                full_name=full_name,
                role=Role(role) if role else None,
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = success_response(user_to_media(user))
        resp.status = falcon.HTTP_200


class UserStatusResource:
    """POST /v1/users/{user_id}/status - activate or deactivate an account."""

    def __init__(self, set_user_active: SetUserActiveUseCase) -> None:
        self._set_active = set_user_active

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            _unauthorized(resp)
            return

        is_active = await _bool_field(req, resp, "is_active")
        if is_active is None:
            return

        try:
            user = await self._set_active.execute(actor, user_id, is_active)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = success_response(user_to_media(user))
        resp.status = falcon.HTTP_200


class MeetingPermissionResource:
    """POST /v1/users/{user_id}/meeting-permission - grant or revoke meeting scheduling."""

    def __init__(self, set_meeting_permission: SetMeetingPermissionUseCase) -> None:
        self._set_permission = set_meeting_permission

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        actor = getattr(req.context, "user", None)
        if not actor:
            _unauthorized(resp)
            return

        can_schedule = await _bool_field(req, resp, "can_schedule_meetings")
        if can_schedule is None:
            return

        try:
            user = await self._set_permission.execute(actor, user_id, can_schedule)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = success_response(user_to_media(user))
        resp.status = falcon.HTTP_200
