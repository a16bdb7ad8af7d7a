"""Route guard decision DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of guarding a page route: allow, or redirect elsewhere."""

    allowed: bool
    redirect_to: str | None = None
    reason: str = ""

    @classmethod
    def allow(cls, reason: str = "") -> "RouteDecision":
        return cls(allowed=True, reason=reason)

    @classmethod
    def redirect(cls, location: str, reason: str) -> "RouteDecision":
        return cls(allowed=False, redirect_to=location, reason=reason)
