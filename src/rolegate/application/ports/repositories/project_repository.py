"""Project assignment repository port."""

from typing import Protocol


class ProjectRepository(Protocol):
    """Port for project membership lookups."""

    async def is_assigned(self, user_id: str, project_id: str) -> bool: ...
