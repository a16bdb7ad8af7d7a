"""Keycloak OIDC provider - token validation and user attribute sync."""

import logging
from typing import Any

from keycloak import KeycloakAdmin, KeycloakOpenID
from keycloak.exceptions import KeycloakError

from rolegate.application.dto.identity import AuthIdentity

logger = logging.getLogger(__name__)

# Attributes mirrored from the users table for per-request role checks
SYNCED_ATTRIBUTES = ("role", "is_active", "full_name", "can_schedule_meetings")


def _flatten_attributes(raw: dict[str, Any]) -> dict[str, Any]:
    """Keycloak stores attributes as lists of strings; unwrap single values."""
    flat: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, list):
            flat[key] = value[0] if len(value) == 1 else value
        else:
            flat[key] = value
    return flat


class KeycloakProvider:
    """Keycloak OIDC - validates JWT and reads/writes user attributes."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._admin = KeycloakAdmin(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> AuthIdentity | None:
        """Introspect JWT, return identity with attributes or None."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active"):
            return None

        attributes = {
            key: token_info[key] for key in SYNCED_ATTRIBUTES if key in token_info
        }
        if "name" in token_info and "full_name" not in attributes:
            attributes["full_name"] = token_info["name"]
        return AuthIdentity(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            attributes=_flatten_attributes(attributes),
        )

    def update_user_attributes(self, user_id: str, attributes: dict[str, Any]) -> None:
        """Merge attributes into the Keycloak user so later tokens carry them."""
        current = self._admin.get_user(user_id).get("attributes") or {}
        merged = dict(current)
        for key, value in attributes.items():
            merged[key] = [str(value).lower() if isinstance(value, bool) else str(value)]
        self._admin.update_user(user_id=user_id, payload={"attributes": merged})
