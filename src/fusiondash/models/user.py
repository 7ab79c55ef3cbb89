"""User entity."""

from __future__ import annotations

from typing import Any

from fusiondash.models.base import Entity

# Id of the signed-in user row; excluded from team and admin listings.
CURRENT_USER_ID = "current"


class User(Entity):
    """A person in the organisation."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    role: str = ""
    department: str = ""
    status: str = ""
    availability: float = 0
    performance_score: float = 0
    projects_completed: int = 0
    current_projects: int = 0
    strengths: str | list[Any] = ""  # JSON array when stored as text
    team_dimensions: str | dict[str, Any] = ""  # JSON object when stored as text
    phone: str = ""
    bio: str = ""
    last_active: str = ""

    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
