"""Identity DTO - what the identity provider knows about a token holder."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthIdentity:
    """Authenticated principal with its user-metadata attributes."""

    user_id: str
    email: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
