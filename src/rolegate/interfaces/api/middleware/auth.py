"""Auth middleware - resolves the current user from the bearer token."""

import asyncio

import falcon.asgi

from rolegate.application.ports import IdentityProvider
from rolegate.application.use_cases.session.get_current_user import GetCurrentUserUseCase


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user (User or None)."""

    def __init__(
        self,
        get_current_user: GetCurrentUserUseCase,
        identity_provider: IdentityProvider | None = None,
    ) -> None:
        self._get_current_user = get_current_user
        self._identity = identity_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._identity:
            return
        identity = await asyncio.to_thread(self._identity.decode_token, auth[7:])
        req.context.user = await self._get_current_user.execute(identity)
