"""Check project access use case."""

from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy


class CheckProjectAccessUseCase:
    """Admins see every project; others only projects they are assigned to."""

    def __init__(
        self,
        unit_of_work_factory: type,
        policy: AccessPolicy = DEFAULT_POLICY,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._policy = policy

    async def execute(self, user_id: str, project_id: str) -> bool:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user and self._policy.is_admin(user.role):
                return True
            return await uow.projects.is_assigned(user_id, project_id)
