"""Domain exceptions."""


class RoleGateError(Exception):
    """Base exception for RoleGate."""

    pass


class PermissionDenied(RoleGateError):
    """User does not have the role required for the requested action."""

    pass


class NotFound(RoleGateError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class Unauthenticated(RoleGateError):
    """No authenticated user for a request that needs one."""

    pass


class ValidationError(RoleGateError):
    """Validation failed for input data."""

    pass
