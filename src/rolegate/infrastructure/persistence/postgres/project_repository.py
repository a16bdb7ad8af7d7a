"""PostgreSQL project assignment repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection


class PostgresProjectRepository:
    """Project membership lookups against user_projects."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def is_assigned(self, user_id: str, project_id: str) -> bool:
        """False for a project id that is not a UUID; no such project can exist."""
        try:
            project_uuid = UUID(str(project_id))
        except ValueError:
            return False
        cur = await self._conn.execute(
            "SELECT 1 FROM user_projects WHERE user_id = %s AND project_id = %s",
            (user_id, project_uuid),
        )
        return await cur.fetchone() is not None
