"""Authorize route use case - page route guard decisions."""

import logging
from collections.abc import Iterable

from rolegate.application.dto.route_decision import RouteDecision
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User
from rolegate.domain.value_objects import Role

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_PATHS: tuple[str, ...] = ("/", "/login", "/team/login", "/auth/callback")
ADMIN_FEATURE_PATHS: tuple[str, ...] = ("/projects/create", "/analytics")

LOGIN_PATH = "/login"
TEAM_PREFIX = "/team"
TEAM_LOGIN_PATH = "/team/login"
INACTIVE_PATH = "/login?error=inactive"


class AuthorizeRouteUseCase:
    """Decide whether a user may open a page route, or where to send them."""

    def __init__(
        self,
        policy: AccessPolicy = DEFAULT_POLICY,
        public_paths: Iterable[str] = DEFAULT_PUBLIC_PATHS,
        admin_feature_paths: Iterable[str] = ADMIN_FEATURE_PATHS,
    ) -> None:
        self._policy = policy
        self._public_paths = frozenset(public_paths)
        self._admin_feature_paths = frozenset(admin_feature_paths)

    def execute(self, pathname: str, user: User | None) -> RouteDecision:
        """Apply public, session, status, role and admin-feature checks in order."""
        if pathname in self._public_paths:
            return RouteDecision.allow("public")

        if user is None:
            if pathname.startswith(TEAM_PREFIX):
                return RouteDecision.redirect(TEAM_LOGIN_PATH, "unauthenticated")
            return RouteDecision.redirect(LOGIN_PATH, "unauthenticated")

        if not user.is_active:
            logger.info("Blocking inactive user %s", user.id)
            return RouteDecision.redirect(INACTIVE_PATH, "inactive")

        required = self._policy.get_required_role(pathname)
        if required is not None and not self._policy.has_role(user.role, required):
            home = self._policy.home_path(user.role) or LOGIN_PATH
            logger.info(
                "Route %s needs %s, user %s is %s", pathname, required, user.id, user.role
            )
            return RouteDecision.redirect(home, "insufficient_role")

        if pathname in self._admin_feature_paths and not self._policy.is_admin(user.role):
            fallback = (
                self._policy.home_path(Role.MEMBER)
                if user.role == Role.MEMBER
                else self._policy.home_path(Role.ASSOCIATE)
            )
            return RouteDecision.redirect(fallback or LOGIN_PATH, "admin_only")

        return RouteDecision.allow()
