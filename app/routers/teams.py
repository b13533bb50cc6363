from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.database import get_db
from app.db.repositories import TeamRepository
from app.services.security import Caller, get_current_caller
from app.services.team_access import DOCS_TEAM_BY_ID, DOCS_TEAM_MEMBERS, TeamAccessService

router = APIRouter(prefix="/teams", tags=["Teams"])

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"description": "Invalid token.", "content": {"application/json": {"example": {"message": "invalid token"}}}},
    401: {"description": "Unauthenticated.", "content": {"application/json": {"example": {"message": "Unauthenticated."}}}},
}


def _not_found_response(docs_page: str) -> dict[int | str, dict[str, Any]]:
    example = {"message": "Team not found.", "docs": settings.docs_url(docs_page)}
    return {404: {"description": "Team not found.", "content": {"application/json": {"example": example}}}}


def get_team_access_service(db: Session = Depends(get_db)) -> TeamAccessService:
    return TeamAccessService(TeamRepository(db))


@router.get("", summary="List", description="Get all teams.", responses=_ERROR_RESPONSES)
def list_teams(
    caller: Caller = Depends(get_current_caller),
    service: TeamAccessService = Depends(get_team_access_service),
) -> list[dict[str, Any]]:
    return service.list_teams(caller)


# /current routes must be declared before /{team_id}
@router.get(
    "/current",
    summary="Authenticated Team",
    description="Get currently authenticated team.",
    responses=_ERROR_RESPONSES,
)
def current_team(
    caller: Caller = Depends(get_current_caller),
    service: TeamAccessService = Depends(get_team_access_service),
) -> dict[str, Any]:
    return service.get_current_team(caller)


@router.get(
    "/current/members",
    summary="Authenticated Team Members",
    description="Get currently authenticated team members.",
    responses=_ERROR_RESPONSES,
)
def current_team_members(
    caller: Caller = Depends(get_current_caller),
    service: TeamAccessService = Depends(get_team_access_service),
) -> list[dict[str, Any]]:
    return service.get_current_team_members(caller)


@router.get(
    "/{team_id}",
    summary="Get",
    description="Get team by TeamId.",
    responses={**_ERROR_RESPONSES, **_not_found_response(DOCS_TEAM_BY_ID)},
)
def team_by_id(
    team_id: int = Path(description="Team ID"),
    caller: Caller = Depends(get_current_caller),
    service: TeamAccessService = Depends(get_team_access_service),
) -> dict[str, Any]:
    return service.get_team(caller, team_id)


@router.get(
    "/{team_id}/members",
    summary="Members",
    description="Get members by TeamId.",
    responses={**_ERROR_RESPONSES, **_not_found_response(DOCS_TEAM_MEMBERS)},
)
def members_by_id(
    team_id: int = Path(description="Team ID"),
    caller: Caller = Depends(get_current_caller),
    service: TeamAccessService = Depends(get_team_access_service),
) -> list[dict[str, Any]]:
    return service.get_team_members(caller, team_id)
