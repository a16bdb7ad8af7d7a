"""PostgreSQL task repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from rolegate.domain.entities import Task


class PostgresTaskRepository:
    """Task lookups."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, task_id: str) -> Task | None:
        """Get task by id; a malformed id finds nothing."""
        try:
            task_uuid = UUID(str(task_id))
        except ValueError:
            return None
        cur = await self._conn.execute(
            "SELECT id, project_id, assigned_to FROM tasks WHERE id = %s",
            (task_uuid,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Task(
            id=str(r[0]),
            project_id=str(r[1]),
            assigned_to=str(r[2]) if r[2] is not None else None,
        )
