"""Set user active use case - admin activates or deactivates an account."""

import asyncio

from rolegate.application.ports import IdentityProvider
from rolegate.application.use_cases.audit.log_audit import LogAuditUseCase
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User
from rolegate.domain.exceptions import NotFound, PermissionDenied


class SetUserActiveUseCase:
    """Toggle is_active in the users table and identity attributes."""

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

    async def execute(self, actor: User, user_id: str, is_active: bool) -> User:
        if not self._policy.is_admin(actor.role):
            raise PermissionDenied("Only administrators can change account status")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            user.is_active = is_active
            await uow.users.update(user)

        await asyncio.to_thread(
            self._identity.update_user_attributes, user_id, {"is_active": is_active}
        )
        await self._log_audit.execute(
            actor,
            action_type="USER_ACTIVATED" if is_active else "USER_DEACTIVATED",
            resource_type="user",
            resource_id=user_id,
        )
        return user
