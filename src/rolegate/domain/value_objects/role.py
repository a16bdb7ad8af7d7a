"""User roles for RBAC."""

from enum import StrEnum

# Legacy claim values that name an existing role
ROLE_ALIASES = {"team_member": "member"}


class Role(StrEnum):
    """Privilege tiers, lowest first."""

    MEMBER = "member"
    ASSOCIATE = "associate"
    ADMIN = "admin"

    @classmethod
    def from_claim(cls, value: object) -> "Role | None":
        """Role from an identity attribute.

        A missing or empty claim is a member. A claim naming no known role
        returns None and grants nothing.
        """
        if value is None or value == "":
            return cls.MEMBER
        if not isinstance(value, str):
            return None
        try:
            return cls(ROLE_ALIASES.get(value, value))
        except ValueError:
            return None
