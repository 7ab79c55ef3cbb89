"""Team and user-administration view models."""

from __future__ import annotations

from fusiondash.views.base import ViewModel


class TeamMember(ViewModel):
    id: str
    name: str
    role: str
    department: str
    email: str
    availability: float
    performance_score: float
    projects_completed: int
    current_projects: int
    strengths: list[str]
    team_dimensions: dict[str, float]
    status: str


class ManagedUser(ViewModel):
    id: str
    name: str
    email: str
    role: str
    department: str
    status: str
    last_active: str
