from app.db.repositories.protocols import TeamDirectory
from app.db.repositories.team import TeamRepository
from app.db.repositories.user import UserRepository

__all__ = [
    "TeamDirectory",
    "TeamRepository",
    "UserRepository",
]
