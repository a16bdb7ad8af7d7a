"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi
from falcon.asgi import App

from rolegate.interfaces.api.errors import create_error_handler
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


@dataclass
class Resources:
    """All API resources, wired by the composition root."""

    health: HealthResource
    me: MeResource
    access: AccessResource
    project_access: ProjectAccessResource
    task_access: TaskAccessResource
    audit_logs: AuditLogsResource
    user: UserResource
    user_status: UserStatusResource
    meeting_permission: MeetingPermissionResource


def create_app(resources: Resources, middleware: list, production: bool = False) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, create_error_handler(production))
    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/me", resources.me)
    app.add_route("/v1/access", resources.access)
    app.add_route("/v1/projects/{project_id}/access", resources.project_access)
    app.add_route("/v1/tasks/{task_id}/access", resources.task_access)
    app.add_route("/v1/audit-logs", resources.audit_logs)
    app.add_route("/v1/users/{user_id}", resources.user)
    app.add_route("/v1/users/{user_id}/status", resources.user_status)
    app.add_route("/v1/users/{user_id}/meeting-permission", resources.meeting_permission)
    return app
