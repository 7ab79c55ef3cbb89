"""Team and user-administration composer."""

import logging

from fusiondash.core.base import Composer
from fusiondash.core.joins import parse_json
from fusiondash.models.user import CURRENT_USER_ID, User
from fusiondash.views.team import ManagedUser, TeamMember

logger = logging.getLogger(__name__)


class TeamComposer(Composer):
    """Composes the team roster and the user-management table."""

    async def team_members(self) -> list[TeamMember]:
        """First N complete profiles, in store order.

        Drops the signed-in user, users without a department and users with a
        non-positive performance score. No sorting is applied; the store's
        order is taken as the display ranking.
        """
        users = await self._store.users()
        eligible = [
            u
            for u in users
            if u.id != CURRENT_USER_ID and u.department != "" and u.performance_score > 0
        ]
        top = eligible[: self._config.team_top_n]
        logger.debug("Team roster: %d eligible, showing %d", len(eligible), len(top))
        return [_team_member(u) for u in top]

    async def managed_users(self) -> list[ManagedUser]:
        """Every user except the signed-in one; role and status pass through as stored."""
        users = await self._store.users()
        return [
            ManagedUser(
                id=u.id,
                name=u.full_name(),
                email=u.email,
                role=u.role,
                department=u.department,
                status=u.status,
                last_active=u.last_active,
            )
            for u in users
            if u.id != CURRENT_USER_ID
        ]


def _team_member(user: User) -> TeamMember:
    dimensions = parse_json(user.team_dimensions, {})
    return TeamMember(
        id=user.id,
        name=user.full_name(),
        role=user.role,
        department=user.department,
        email=user.email,
        availability=user.availability,
        performance_score=user.performance_score,
        projects_completed=user.projects_completed,
        current_projects=user.current_projects,
        strengths=[str(s) for s in parse_json(user.strengths, [])],
        team_dimensions={
            str(k): v
            for k, v in dimensions.items()
            if isinstance(v, int | float) and not isinstance(v, bool)
        },
        status=user.status,
    )
