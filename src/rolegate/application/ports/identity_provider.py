"""Identity provider port - token validation and user attribute sync."""

from typing import Any, Protocol

from rolegate.application.dto.identity import AuthIdentity


class IdentityProvider(Protocol):
    """Port for the hosted identity service."""

    def decode_token(self, token: str) -> AuthIdentity | None: ...

    def update_user_attributes(self, user_id: str, attributes: dict[str, Any]) -> None: ...
