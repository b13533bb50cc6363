from __future__ import annotations

from .team import Team, team_user
from .user import User

__all__ = [
    "Team",
    "User",
    "team_user",
]
