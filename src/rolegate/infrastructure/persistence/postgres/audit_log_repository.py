"""PostgreSQL audit log repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from rolegate.domain.entities import AuditLog


class PostgresAuditLogRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditLog) -> AuditLog:
        """Insert audit entry."""
        await self._conn.execute(
            "INSERT INTO audit_logs (id, user_id, action_type, resource_type, resource_id, details, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.user_id,
                entry.action_type,
                entry.resource_type,
                entry.resource_id,
                Jsonb(entry.details),
                entry.created_at,
            ),
        )
        return entry

    async def list_recent(self, *, offset: int, limit: int) -> tuple[list[AuditLog], int]:
        """List entries newest first with the actor's name and email."""
        cur = await self._conn.execute("SELECT count(*) FROM audit_logs")
        total = (await cur.fetchone())[0]

        cur = await self._conn.execute(
            "SELECT a.id, a.user_id, a.action_type, a.resource_type, a.resource_id, "
            "a.details, a.created_at, u.full_name, u.email "
            "FROM audit_logs a LEFT JOIN users u ON u.id = a.user_id "
            "ORDER BY a.created_at DESC LIMIT %s OFFSET %s",
            (limit, offset),
        )
        rows = await cur.fetchall()
        items = [
            AuditLog(
                id=r[0],
                user_id=str(r[1]),
                action_type=r[2],
                resource_type=r[3],
                resource_id=r[4],
                details=r[5] or {},
                created_at=r[6],
                user_full_name=r[7],
                user_email=r[8],
            )
            for r in rows
        ]
        return items, total
