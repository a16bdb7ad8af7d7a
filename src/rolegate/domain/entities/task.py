"""Task entity - the fields access checks need."""

from dataclasses import dataclass


@dataclass
class Task:
    """Task - belongs to a project, optionally assigned to a user."""

    id: str
    project_id: str
    assigned_to: str | None = None
