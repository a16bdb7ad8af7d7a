"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from rolegate.domain.entities import User
from rolegate.domain.value_objects import Role

_COLUMNS = "id, email, full_name, role, is_active, can_schedule_meetings"


def _row_to_user(r: tuple) -> User:
    return User(
        id=str(r[0]),
        email=r[1],
        full_name=r[2],
        role=Role(r[3]),
        is_active=r[4],
        can_schedule_meetings=bool(r[5]),
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM users WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_user(r)

    async def update(self, user: User) -> None:
        """Update mutable user fields."""
        await self._conn.execute(
            "UPDATE users SET full_name=%s, role=%s, is_active=%s, can_schedule_meetings=%s "
            "WHERE id=%s",
            (
                user.full_name,
                user.role.value,
                user.is_active,
                user.can_schedule_meetings,
                user.id,
            ),
        )
