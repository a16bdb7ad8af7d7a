"""User entity - dashboard account with a role."""

from dataclasses import dataclass

from rolegate.domain.value_objects import Role


@dataclass
class User:
    """User - identity plus role and account flags."""

    id: str
    email: str
    full_name: str
    role: Role
    is_active: bool = True
    can_schedule_meetings: bool = False
