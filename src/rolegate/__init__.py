"""RoleGate - role-based access control for the team dashboard."""

__version__ = "0.1.0"
