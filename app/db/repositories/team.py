from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from app.db.repositories.base import Repository
from app.models import Team, User, team_user

# Primary keys are signed 64-bit integers; anything wider cannot match a row.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable_id(value: int) -> bool:
    return _MIN_ID <= value <= _MAX_ID


@dataclass
class TeamRepository(Repository[Session]):
    """SQL-backed team directory scoped to a user's memberships."""

    def list_by_caller(self, user_id: int) -> List[Team]:
        user = self.db.get(User, user_id)
        if user is None:
            return []
        return list(user.teams)

    def find_by_id_for_caller(self, user_id: int, team_id: int) -> Optional[Team]:
        if not _storable_id(team_id):
            return None
        return (
            self.db.query(Team)
            .join(team_user, team_user.c.team_id == Team.id)
            .filter(team_user.c.user_id == user_id, Team.id == team_id)
            .first()
        )

    def members(self, team_id: int) -> List[User]:
        if not _storable_id(team_id):
            return []
        team = self.db.get(Team, team_id)
        if team is None:
            return []
        return list(team.members)

    def current_team(self, user_id: int) -> Optional[Team]:
        """Return the user's selected team, falling back to their first membership."""
        user = self.db.get(User, user_id)
        if user is None:
            return None
        teams = user.teams
        if user.current_team_id is not None:
            for team in teams:
                if team.id == user.current_team_id:
                    return team
        return teams[0] if teams else None
