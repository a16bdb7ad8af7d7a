"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from rolegate.application.dto.identity import AuthIdentity
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
from rolegate.domain.value_objects import Role
from rolegate.interfaces.api.app import Resources, create_app
from rolegate.interfaces.api.middleware.auth import AuthMiddleware
from rolegate.interfaces.api.middleware.cors import CORSMiddleware
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

from tests.conftest import make_user

# token -> identity attributes
TOKENS = {
    "admin-token": ("admin-1", {"role": "admin", "is_active": True, "full_name": "Ada Admin"}),
    "assoc-token": ("assoc-1", {"role": "associate", "is_active": True}),
    "member-token": ("member-1", {"role": "member", "is_active": True}),
    "inactive-token": ("inactive-1", {"role": "admin", "is_active": False}),
    "guest-token": ("guest-1", {"role": "guest", "is_active": True}),
}


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def identity_provider(mock_identity_provider):
    def _decode(token: str) -> AuthIdentity | None:
        if token not in TOKENS:
            return None
        user_id, attributes = TOKENS[token]
        return AuthIdentity(user_id=user_id, email=f"{user_id}@example.com", attributes=attributes)

    mock_identity_provider.decode_token.side_effect = _decode
    return mock_identity_provider


@pytest.fixture
def seeded_uow(fake_uow):
    """Users table mirroring TOKENS plus one plain member to administer."""
    fake_uow.users.add(make_user("admin-1", Role.ADMIN))
    fake_uow.users.add(make_user("assoc-1", Role.ASSOCIATE))
    fake_uow.users.add(make_user("member-1", Role.MEMBER))
    fake_uow.users.add(make_user("target-1", Role.MEMBER))
    return fake_uow


@pytest.fixture
def app(uow_factory, seeded_uow, identity_provider):
    """Falcon ASGI app with the full middleware stack over fakes."""
    authorize_route = AuthorizeRouteUseCase()
    log_audit = LogAuditUseCase(uow_factory)
    resources = Resources(
        health=HealthResource(),
        me=MeResource(),
        access=AccessResource(authorize_route),
        project_access=ProjectAccessResource(CheckProjectAccessUseCase(uow_factory)),
        task_access=TaskAccessResource(CheckTaskAccessUseCase(uow_factory)),
        audit_logs=AuditLogsResource(ListAuditLogsUseCase(uow_factory)),
        user=UserResource(UpdateUserUseCase(uow_factory, identity_provider, log_audit)),
        user_status=UserStatusResource(
            SetUserActiveUseCase(uow_factory, identity_provider, log_audit)
        ),
        meeting_permission=MeetingPermissionResource(
            SetMeetingPermissionUseCase(uow_factory, identity_provider, log_audit)
        ),
    )
    return create_app(
        resources,
        middleware=[
            CORSMiddleware(["http://localhost:3000"]),
            AuthMiddleware(GetCurrentUserUseCase(uow_factory), identity_provider),
            RouteGuardMiddleware(authorize_route),
        ],
        production=True,
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
