"""Pytest fixtures for RoleGate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from unittest.mock import Mock

import pytest

from rolegate.domain.entities import AuditLog, Task, User
from rolegate.domain.value_objects import Role


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def update(self, user: User) -> None:
        self._by_id[user.id] = user

    def add(self, user: User) -> User:
        """Helper to add user for tests."""
        self._by_id[user.id] = user
        return user


class FakeAuditLogRepository:
    """In-memory audit log repository."""

    def __init__(self) -> None:
        self.entries: list[AuditLog] = []

    async def create(self, entry: AuditLog) -> AuditLog:
        self.entries.append(entry)
        return entry

    async def list_recent(self, *, offset: int, limit: int) -> tuple[list[AuditLog], int]:
        ordered = sorted(self.entries, key=lambda e: e.created_at, reverse=True)
        return ordered[offset : offset + limit], len(ordered)


class FakeProjectRepository:
    """In-memory user_projects table."""

    def __init__(self) -> None:
        self._assignments: set[tuple[str, str]] = set()

    async def is_assigned(self, user_id: str, project_id: str) -> bool:
        return (user_id, project_id) in self._assignments

    def assign(self, user_id: str, project_id: str) -> None:
        self._assignments.add((user_id, project_id))


class FakeTaskRepository:
    """In-memory task repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Task] = {}

    async def get_by_id(self, task_id: str) -> Task | None:
        return self._by_id.get(task_id)

    def add(self, task: Task) -> Task:
        self._by_id[task.id] = task
        return task


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.audit_logs = FakeAuditLogRepository()
        self.projects = FakeProjectRepository()
        self.tasks = FakeTaskRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_user(user_id: str = "user-1", role: Role = Role.MEMBER, **kwargs) -> User:
    """User with sensible defaults."""
    return User(
        id=user_id,
        email=kwargs.pop("email", f"{user_id}@example.com"),
        full_name=kwargs.pop("full_name", user_id.title()),
        role=role,
        **kwargs,
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork for every call in a test."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def admin() -> User:
    return make_user("admin-1", Role.ADMIN)


@pytest.fixture
def associate() -> User:
    return make_user("assoc-1", Role.ASSOCIATE)


@pytest.fixture
def member() -> User:
    return make_user("member-1", Role.MEMBER)


@pytest.fixture
def mock_identity_provider() -> Mock:
    """Mock IdentityProvider - no token decodes unless a test configures it."""
    mock = Mock()
    mock.decode_token.return_value = None
    return mock
