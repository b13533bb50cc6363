from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from app.models import Team, User


class TeamDirectory(Protocol):
    """Read-only access to the teams a user belongs to and their members.

    Every lookup is scoped to the user's memberships: a team the user does not
    belong to is reported exactly like a team that does not exist.
    """

    def list_by_caller(self, user_id: int) -> Sequence["Team"]:
        ...

    def find_by_id_for_caller(self, user_id: int, team_id: int) -> "Team | None":
        ...

    def members(self, team_id: int) -> Sequence["User"]:
        ...

    def current_team(self, user_id: int) -> "Team | None":
        ...
