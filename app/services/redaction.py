"""Field-visibility policy for team and member payloads.

Projections build fresh dictionaries from the ORM objects; the stored
entities are never mutated.
"""

from __future__ import annotations

from typing import Any, Iterable

from app.core.config import settings
from app.core.formatting import serialize_api_response
from app.models import Team, User
from app.schemas.team import SENSITIVE_TEAM_FIELDS, TeamOut
from app.schemas.user import UserOut
from app.services.security import grants

__all__ = ["redact_team", "redact_teams", "project_members"]


def redact_team(team: Team, granted_scopes: Iterable[str]) -> dict[str, Any]:
    """Project `team` for output under the abilities in `granted_scopes`.

    ``custom_server_limit`` and membership data are never part of
    :class:`TeamOut`. Secrets are dropped unless the sensitive ability is
    granted.
    """
    exclude: set[str] = set()
    if not grants(granted_scopes, settings.sensitive_ability):
        exclude |= SENSITIVE_TEAM_FIELDS
    payload = TeamOut.model_validate(team).model_dump(mode="json", exclude=exclude)
    return serialize_api_response(payload)


def redact_teams(teams: Iterable[Team], granted_scopes: Iterable[str]) -> list[dict[str, Any]]:
    scopes = frozenset(granted_scopes)
    return [redact_team(team, scopes) for team in teams]


def project_members(members: Iterable[User]) -> list[dict[str, Any]]:
    return serialize_api_response(
        [UserOut.model_validate(member).model_dump(mode="json") for member in members]
    )
