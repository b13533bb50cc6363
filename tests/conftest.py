import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-teams")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RUN_STARTUP_DDL", "false")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from app.db.database import Base, SessionLocal, engine
from app.main import app
from app.models import Team, User, team_user
from app.services.security import create_access_token

CREATED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

_TEAM_DEFAULTS = {
    "description": None,
    "personal_team": False,
    "show_boarding": False,
    "smtp_enabled": False,
    "resend_enabled": False,
    "discord_enabled": False,
    "telegram_enabled": False,
}
_USER_DEFAULTS = {
    "force_password_reset": False,
    "marketing_emails": True,
}


def build_team(**fields) -> Team:
    return Team(**{**_TEAM_DEFAULTS, "created_at": CREATED, "updated_at": CREATED, **fields})


def build_user(**fields) -> User:
    return User(**{**_USER_DEFAULTS, "created_at": CREATED, "updated_at": CREATED, **fields})


@pytest.fixture()
def team_factory():
    return build_team


@pytest.fixture()
def user_factory():
    return build_user


@pytest.fixture()
def db_setup():
    # Fresh schema per test keeps membership fixtures independent
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def seeded(db_setup):
    """Alice belongs to teams 3, 1, 2 (in that order); team 4 belongs to Carol only."""
    with SessionLocal() as db:
        db.add_all(
            [
                build_team(
                    id=1,
                    name="Root Team",
                    description="The first team",
                    smtp_enabled=True,
                    smtp_host="smtp.example.com",
                    smtp_port=587,
                    smtp_username="mailer",
                    smtp_password="x",
                    resend_api_key="re_123",
                    telegram_token="tg-token",
                    custom_server_limit=5,
                ),
                build_team(id=2, name="Second Team", smtp_password="y", custom_server_limit=10),
                build_team(id=3, name="Third Team"),
                build_team(id=4, name="Carol's Team", smtp_password="secret"),
            ]
        )
        db.flush()
        db.add_all(
            [
                build_user(id=1, name="Alice", email="alice@example.com", password_hash="hash", remember_token="rt", current_team_id=2),
                build_user(id=2, name="Bob", email="bob@example.com", password_hash="hash"),
                build_user(id=3, name="Carol", email="carol@example.com", current_team_id=4),
                build_user(id=4, name="Dave", email="dave@example.com"),
            ]
        )
        db.flush()
        db.execute(
            insert(team_user),
            [
                {"team_id": 3, "user_id": 1, "role": "member"},
                {"team_id": 1, "user_id": 1, "role": "owner"},
                {"team_id": 2, "user_id": 1, "role": "admin"},
                {"team_id": 1, "user_id": 2, "role": "member"},
                {"team_id": 4, "user_id": 3, "role": "owner"},
            ],
        )
        db.commit()
    yield


@pytest.fixture()
def client(seeded):
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    def _headers(user_id: int = 1, *, team_id: int | None = 1, abilities=("read",)) -> dict[str, str]:
        token = create_access_token(str(user_id), team_id=team_id, abilities=abilities)
        return {"Authorization": f"Bearer {token}"}

    return _headers
