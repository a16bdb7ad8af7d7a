"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from rolegate import __version__
from rolegate.application.use_cases.access.authorize_route import AuthorizeRouteUseCase
from rolegate.application.use_cases.access.check_project_access import (
    CheckProjectAccessUseCase,
)
from rolegate.application.use_cases.access.check_task_access import CheckTaskAccessUseCase
from rolegate.application.use_cases.audit.list_audit_logs import ListAuditLogsUseCase
from rolegate.application.use_cases.audit.log_audit import LogAuditUseCase
from rolegate.application.use_cases.session.get_current_user import GetCurrentUserUseCase
from rolegate.application.use_cases.users.set_meeting_permission import (
    SetMeetingPermissionUseCase,
)
from rolegate.application.use_cases.users.set_user_active import SetUserActiveUseCase
from rolegate.application.use_cases.users.update_user import UpdateUserUseCase
from rolegate.config import get_settings
from rolegate.domain.access_policy import AccessPolicy
from rolegate.infrastructure.auth.keycloak_provider import KeycloakProvider
from rolegate.infrastructure.persistence.postgres.connection import create_pool
from rolegate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from rolegate.interfaces.api.app import Resources, create_app
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.middleware.cors import CORSMiddleware
from rolegate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from rolegate.interfaces.api.middleware.route_guard import RouteGuardMiddleware
from rolegate.interfaces.api.resources.access import (
    AccessResource,
    ProjectAccessResource,
    TaskAccessResource,
)
from rolegate.interfaces.api.resources.audit_logs import AuditLogsResource
from rolegate.interfaces.api.resources.health import HealthResource
from rolegate.interfaces.api.resources.me import MeResource
from rolegate.interfaces.api.resources.users import (
    MeetingPermissionResource,
    UserResource,
    UserStatusResource,
)
from rolegate.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("RoleGate v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(create_rolegate_app(), host="0.0.0.0", port=8000)


def create_rolegate_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)
    policy = AccessPolicy()

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; every request is anonymous")

    get_current_user = GetCurrentUserUseCase(unit_of_work_factory=uow_factory)
    authorize_route = AuthorizeRouteUseCase(
        policy=policy,
        public_paths=settings.public_path_list(),
    )
    log_audit = LogAuditUseCase(unit_of_work_factory=uow_factory)
    resources = Resources(
        health=HealthResource(pool),
        me=MeResource(policy),
        access=AccessResource(authorize_route, policy),
        project_access=ProjectAccessResource(
            CheckProjectAccessUseCase(unit_of_work_factory=uow_factory, policy=policy)
        ),
        task_access=TaskAccessResource(
            CheckTaskAccessUseCase(unit_of_work_factory=uow_factory, policy=policy)
        ),
        audit_logs=AuditLogsResource(
            ListAuditLogsUseCase(unit_of_work_factory=uow_factory, policy=policy)
        ),
        user=UserResource(
            UpdateUserUseCase(
                unit_of_work_factory=uow_factory,
                identity_provider=keycloak,
                log_audit=log_audit,
                policy=policy,
            )
        ),
        user_status=UserStatusResource(
            SetUserActiveUseCase(
                unit_of_work_factory=uow_factory,
                identity_provider=keycloak,
                log_audit=log_audit,
                policy=policy,
            )
        ),
        meeting_permission=MeetingPermissionResource(
            SetMeetingPermissionUseCase(
                unit_of_work_factory=uow_factory,
                identity_provider=keycloak,
                log_audit=log_audit,
                policy=policy,
            )
        ),
    )

    return create_app(
        resources,
        middleware=[
            CORSMiddleware(settings.cors_origin_list()),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(get_current_user, keycloak),
            RouteGuardMiddleware(authorize_route),
        ],
        production=settings.is_production,
    )
