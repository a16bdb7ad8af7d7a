"""Route guard middleware - redirects page requests the user may not open."""

import logging

import falcon
import falcon.asgi

from rolegate.application.use_cases.access.authorize_route import AuthorizeRouteUseCase

logger = logging.getLogger(__name__)

API_PREFIX = "/v1"
STATIC_PREFIXES = ("/_next/static", "/_next/image", "/favicon.ico")
STATIC_SUFFIXES = (".svg", ".png", ".jpg", ".jpeg", ".gif", ".webp")


def is_guarded(path: str) -> bool:
    """Page routes only; API calls and static assets pass through."""
    if path == API_PREFIX or path.startswith(API_PREFIX + "/"):
        return False
    if path.startswith(STATIC_PREFIXES):
        return False
    return not path.lower().endswith(STATIC_SUFFIXES)


class RouteGuardMiddleware:
    """Applies AuthorizeRouteUseCase to every guarded request.

    Must run after AuthMiddleware so req.context.user is set.
    """

    def __init__(self, authorize_route: AuthorizeRouteUseCase) -> None:
        self._authorize = authorize_route

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if not is_guarded(req.path):
            return
        user = getattr(req.context, "user", None)
        decision = self._authorize.execute(req.path, user)
        if decision.allowed:
            return

        logger.info("Redirecting %s to %s (%s)", req.path, decision.redirect_to, decision.reason)
        resp.status = falcon.HTTP_302
        resp.location = decision.redirect_to
        resp.complete = True
