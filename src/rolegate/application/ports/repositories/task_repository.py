"""Task repository port."""

from typing import Protocol

from rolegate.domain.entities import Task


class TaskRepository(Protocol):
    """Port for task lookups."""

    async def get_by_id(self, task_id: str) -> Task | None: ...
