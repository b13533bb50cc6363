from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.core.config import settings
from app.core.errors import InvalidTokenError, TeamNotFoundError
from app.core.logging import get_logger
from app.core.metrics import count_calls
from app.db.repositories.protocols import TeamDirectory
from app.models import Team
from app.services.redaction import project_members, redact_team, redact_teams
from app.services.security import Caller

logger = get_logger("teams.services.team_access", component="service")

# API reference pages linked from not-found bodies.
DOCS_TEAM_BY_ID = "get-team-by-teamid"
DOCS_TEAM_MEMBERS = "get-team-by-teamid-members"
DOCS_CURRENT_TEAM = "get-current-team"


def _require_team_scope(caller: Caller) -> None:
    if caller.team_id is None:
        logger.info("team_scope_missing", extra={"structured_data": {"user_id": caller.user_id}})
        raise InvalidTokenError()


@dataclass
class TeamAccessService:
    """Read-only team operations for an authenticated caller.

    Every operation rejects tokens without a team scope before touching the
    directory, and only ever looks at teams the caller is a member of.
    """

    directory: TeamDirectory

    @count_calls("teams.list")
    def list_teams(self, caller: Caller) -> list[dict[str, Any]]:
        _require_team_scope(caller)
        teams = sorted(self.directory.list_by_caller(caller.user_id), key=lambda team: team.id)
        return redact_teams(teams, caller.abilities)

    @count_calls("teams.get")
    def get_team(self, caller: Caller, team_id: int) -> dict[str, Any]:
        _require_team_scope(caller)
        team = self._member_team(caller, team_id, DOCS_TEAM_BY_ID)
        return redact_team(team, caller.abilities)

    @count_calls("teams.members")
    def get_team_members(self, caller: Caller, team_id: int) -> list[dict[str, Any]]:
        _require_team_scope(caller)
        team = self._member_team(caller, team_id, DOCS_TEAM_MEMBERS)
        return project_members(self.directory.members(team.id))

    @count_calls("teams.current")
    def get_current_team(self, caller: Caller) -> dict[str, Any]:
        _require_team_scope(caller)
        return redact_team(self._current_team(caller), caller.abilities)

    @count_calls("teams.current.members")
    def get_current_team_members(self, caller: Caller) -> list[dict[str, Any]]:
        _require_team_scope(caller)
        team = self._current_team(caller)
        return project_members(self.directory.members(team.id))

    def _member_team(self, caller: Caller, team_id: int, docs_page: str) -> Team:
        team = self.directory.find_by_id_for_caller(caller.user_id, team_id)
        if team is None:
            # Foreign and missing teams are indistinguishable to the caller.
            logger.info(
                "team_lookup_miss",
                extra={"structured_data": {"user_id": caller.user_id, "team_id": team_id}},
            )
            raise TeamNotFoundError(settings.docs_url(docs_page))
        return team

    def _current_team(self, caller: Caller) -> Team:
        team = self.directory.current_team(caller.user_id)
        if team is None:
            logger.warning("current_team_missing", extra={"structured_data": {"user_id": caller.user_id}})
            raise TeamNotFoundError(settings.docs_url(DOCS_CURRENT_TEAM))
        return team


__all__ = [
    "TeamAccessService",
    "DOCS_TEAM_BY_ID",
    "DOCS_TEAM_MEMBERS",
    "DOCS_CURRENT_TEAM",
]
