"""Unit tests for audit logging and listing."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from rolegate.application.use_cases.audit.list_audit_logs import ListAuditLogsUseCase
from rolegate.application.use_cases.audit.log_audit import LogAuditUseCase
from rolegate.domain.entities import AuditLog
from rolegate.domain.exceptions import PermissionDenied


def _seed_logs(fake_uow, count: int) -> list[AuditLog]:
    start = datetime(2026, 1, 1, tzinfo=UTC)
    logs = [
        AuditLog(
            id=uuid4(),
            user_id="admin-1",
            action_type="USER_UPDATED",
            resource_type="user",
            resource_id=f"u{i}",
            created_at=start + timedelta(minutes=i),
        )
        for i in range(count)
    ]
    fake_uow.audit_logs.entries.extend(logs)
    return logs


@pytest.mark.asyncio
async def test_log_audit_without_actor_is_noop(uow_factory, fake_uow) -> None:
    result = await LogAuditUseCase(uow_factory).execute(None, "USER_UPDATED", "user", "u1")
    assert result is None
    assert fake_uow.audit_logs.entries == []


@pytest.mark.asyncio
async def test_log_audit_writes_entry(uow_factory, fake_uow, admin) -> None:
    entry = await LogAuditUseCase(uow_factory).execute(
        admin, "USER_UPDATED", "user", "u1", details={"role": "associate"}
    )

    assert fake_uow.audit_logs.entries == [entry]
    assert entry.user_id == admin.id
    assert entry.details == {"role": "associate"}
    assert entry.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_log_audit_details_default_empty(uow_factory, admin) -> None:
    entry = await LogAuditUseCase(uow_factory).execute(admin, "USER_ACTIVATED", "user", "u1")
    assert entry.details == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("fixture_name", ["member", "associate"])
async def test_list_audit_logs_admin_only(uow_factory, request, fixture_name) -> None:
    actor = request.getfixturevalue(fixture_name)
    with pytest.raises(PermissionDenied):
        await ListAuditLogsUseCase(uow_factory).execute(actor)


@pytest.mark.asyncio
async def test_list_audit_logs_newest_first_paginated(uow_factory, fake_uow, admin) -> None:
    logs = _seed_logs(fake_uow, 45)
    use_case = ListAuditLogsUseCase(uow_factory)

    first = await use_case.execute(admin, page=1)
    third = await use_case.execute(admin, page=3)

    assert first.total == 45
    assert first.total_pages == 3
    assert len(first.items) == 20
    assert first.items[0].id == logs[-1].id
    assert len(third.items) == 5
    assert third.items[-1].id == logs[0].id


@pytest.mark.asyncio
async def test_list_audit_logs_page_clamped(uow_factory, fake_uow, admin) -> None:
    _seed_logs(fake_uow, 3)
    page = await ListAuditLogsUseCase(uow_factory).execute(admin, page=0)
    assert page.page == 1
    assert len(page.items) == 3


@pytest.mark.asyncio
async def test_list_audit_logs_empty(uow_factory, admin) -> None:
    page = await ListAuditLogsUseCase(uow_factory, page_size=10).execute(admin)
    assert page.items == []
    assert page.total_pages == 0
