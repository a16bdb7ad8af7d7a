"""Set meeting permission use case - admin grants or revokes meeting scheduling."""

import asyncio

from rolegate.application.ports import IdentityProvider
from rolegate.application.use_cases.audit.log_audit import LogAuditUseCase
from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy
from rolegate.domain.entities import User
from rolegate.domain.exceptions import NotFound, PermissionDenied

MEETING_PERMISSION = "can_schedule_meetings"


class SetMeetingPermissionUseCase:
    """Toggle can_schedule_meetings in the users table and identity attributes."""

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

    async def execute(self, actor: User, user_id: str, can_schedule: bool) -> User:
        if not self._policy.is_admin(actor.role):
            raise PermissionDenied("Only administrators can change meeting permissions")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            user.can_schedule_meetings = can_schedule
            await uow.users.update(user)

        await asyncio.to_thread(
            self._identity.update_user_attributes, user_id, {MEETING_PERMISSION: can_schedule}
        )
        await self._log_audit.execute(
            actor,
            action_type="PERMISSION_GRANTED" if can_schedule else "PERMISSION_REVOKED",
            resource_type="user",
            resource_id=user_id,
            details={"permission": MEETING_PERMISSION},
        )
        return user
