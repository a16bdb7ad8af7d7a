"""Check task access use case."""

from rolegate.domain.access_policy import DEFAULT_POLICY, AccessPolicy


class CheckTaskAccessUseCase:
    """Task access: admins, the assignee, or anyone with access to the task's project."""

    def __init__(
        self,
        unit_of_work_factory: type,
        policy: AccessPolicy = DEFAULT_POLICY,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._policy = policy

    async def execute(self, user_id: str, task_id: str) -> bool:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if user and self._policy.is_admin(user.role):
                return True

            task = await uow.tasks.get_by_id(task_id)
            if not task:
                return False
            if task.assigned_to == user_id:
                return True

            return await uow.projects.is_assigned(user_id, task.project_id)
