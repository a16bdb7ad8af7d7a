"""Get current user use case - resolve the signed-in user for a request."""

import logging
from typing import Any

from rolegate.application.dto.identity import AuthIdentity
from rolegate.domain.entities import User
from rolegate.domain.value_objects import Role

logger = logging.getLogger(__name__)

DEFAULT_FULL_NAME = "Anonymous User"


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


class GetCurrentUserUseCase:
    """Build the User from identity attributes, falling back to the users table."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, identity: AuthIdentity | None) -> User | None:
        """Return the user for identity, or None when there is no usable account."""
        if identity is None:
            return None

        attrs = identity.attributes
        # Attributes carry role and status once the account has been synced
        if attrs.get("role") and attrs.get("is_active") is not None:
            role = Role.from_claim(attrs["role"])
            if role is None:
                logger.warning(
                    "Rejecting user %s with unknown role %r", identity.user_id, attrs["role"]
                )
                return None
            return User(
                id=identity.user_id,
                email=identity.email or "",
                full_name=attrs.get("full_name") or DEFAULT_FULL_NAME,
                role=role,
                is_active=_as_bool(attrs["is_active"]),
                can_schedule_meetings=_as_bool(attrs.get("can_schedule_meetings", False)),
            )

        async with self._uow_factory() as uow:
            return await uow.users.get_by_id(identity.user_id)
