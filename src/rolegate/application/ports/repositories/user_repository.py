"""User repository port."""

from typing import Protocol

from rolegate.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def update(self, user: User) -> None: ...
