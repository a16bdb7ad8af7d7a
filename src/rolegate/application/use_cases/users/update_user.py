"""Update user use case - admin edits a user's name or role."""

import asyncio
from typing import Any

from rolegate.application.ports import IdentityProvider
from rolegate.application.use_cases.audit.log_audit import LogAuditUseCase
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User
from rolegate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from rolegate.domain.value_objects import Role


class UpdateUserUseCase:
    """Change full name and/or role, sync identity attributes, audit the change."""

    def __init__(
        self,
        unit_of_work_factory: type,
        identity_provider: IdentityProvider,
        log_audit: LogAuditUseCase,
        policy: AccessPolicy = DEFAULT_POLICY,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._identity = identity_provider
        self._log_audit = log_audit
        self._policy = policy

    async def execute(
        self,
        actor: User,
        user_id: str,
        full_name: str | None = None,
        role: Role | None = None,
    ) -> User:
        if not self._policy.is_admin(actor.role):
            raise PermissionDenied("Only administrators can update users")

        changes: dict[str, Any] = {}
        if full_name:
            changes["full_name"] = full_name
        if role:
            changes["role"] = Role(role).value
        if not changes:
            raise ValidationError("Nothing to update")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            if "full_name" in changes:
                user.full_name = changes["full_name"]
            if "role" in changes:
                user.role = Role(changes["role"])
            await uow.users.update(user)

        await asyncio.to_thread(self._identity.update_user_attributes, user_id, changes)
        await self._log_audit.execute(
            actor,
            action_type="USER_UPDATED",
            resource_type="user",
            resource_id=user_id,
            details=changes,
        )
        return user
