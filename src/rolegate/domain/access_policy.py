"""Access policy - role hierarchy and route prefix rules.

The policy is a pair of static tables:

- a rank per role (higher rank has every permission of the lower ones);
- an ordered sequence of route prefix rules, each naming the minimum role
  for paths starting with that prefix.

Route rules are scanned in declaration order and the first matching prefix
wins. Matching is a plain case-sensitive ``str.startswith``, so ``/adminfoo``
matches ``/admin``. Route definitions may rely on that, so it is kept as is.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rolegate.domain.value_objects import Role


@dataclass(frozen=True)
class RoutePrefixRule:
    """Minimum role for every path starting with ``prefix``."""

    prefix: str
    role: Role


DEFAULT_ROLE_RANKS: Mapping[Role, int] = MappingProxyType(
    {
        Role.ADMIN: 3,
        Role.ASSOCIATE: 2,
        Role.MEMBER: 1,
    }
)

DEFAULT_ROUTE_RULES: tuple[RoutePrefixRule, ...] = (
    RoutePrefixRule("/admin", Role.ADMIN),
    RoutePrefixRule("/associate", Role.ASSOCIATE),
    RoutePrefixRule("/member", Role.MEMBER),
)

DEFAULT_HOME_PATHS: Mapping[Role, str] = MappingProxyType(
    {
        Role.ADMIN: "/admin/dashboard",
        Role.ASSOCIATE: "/associate/dashboard",
        Role.MEMBER: "/member/dashboard",
    }
)


@dataclass(frozen=True)
class AccessPolicy:
    """Immutable role hierarchy plus route rules.

    Raises ValueError on construction when the rank table does not cover
    every role, holds a non-positive rank, or gives two roles the same rank.
    """

    role_ranks: Mapping[Role, int] = field(default_factory=lambda: DEFAULT_ROLE_RANKS)
    route_rules: Iterable[RoutePrefixRule] = DEFAULT_ROUTE_RULES
    home_paths: Mapping[Role, str] = field(default_factory=lambda: DEFAULT_HOME_PATHS)

    def __post_init__(self) -> None:
        ranks = dict(self.role_ranks)
        missing = [role.value for role in Role if role not in ranks]
        if missing:
            raise ValueError(f"Role ranks missing for: {', '.join(missing)}")
        if any(rank <= 0 for rank in ranks.values()):
            raise ValueError("Role ranks must be positive integers")
        if len(set(ranks.values())) != len(ranks):
            raise ValueError("Role ranks must be distinct")
        object.__setattr__(self, "role_ranks", MappingProxyType(ranks))
        object.__setattr__(self, "route_rules", tuple(self.route_rules))
        object.__setattr__(self, "home_paths", MappingProxyType(dict(self.home_paths)))

    def rank(self, role: Role) -> int:
        return self.role_ranks[role]

    def has_role(self, user_role: Role, required_role: Role) -> bool:
        """True when user_role ranks at or above required_role."""
        return self.rank(user_role) >= self.rank(required_role)

    def top_role(self) -> Role:
        return max(self.role_ranks, key=self.role_ranks.__getitem__)

    def is_admin(self, role: Role) -> bool:
        return role == self.top_role()

    def is_associate_or_higher(self, role: Role) -> bool:
        return self.has_role(role, Role.ASSOCIATE)

    def get_required_role(self, pathname: str) -> Role | None:
        """Minimum role for pathname, or None when no rule matches."""
        for rule in self.route_rules:
            if pathname.startswith(rule.prefix):
                return rule.role
        return None

    def home_path(self, role: Role) -> str | None:
        """Dashboard path a role lands on."""
        return self.home_paths.get(role)


DEFAULT_POLICY = AccessPolicy()


def has_role(user_role: Role, required_role: Role) -> bool:
    return DEFAULT_POLICY.has_role(user_role, required_role)


def is_admin(role: Role) -> bool:
    return DEFAULT_POLICY.is_admin(role)


def is_associate_or_higher(role: Role) -> bool:
    return DEFAULT_POLICY.is_associate_or_higher(role)


def get_required_role(pathname: str) -> Role | None:
    return DEFAULT_POLICY.get_required_role(pathname)
