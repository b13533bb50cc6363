from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.database import Base

__all__ = [
    "Team",
    "team_user",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Membership join table; its columns never leave the persistence layer.
team_user = Table(
    "team_user",
    Base.metadata,
    Column("team_id", ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role", String(20), nullable=True, default="member"),
    Column("created_at", DateTime, default=_utcnow),
    Column("updated_at", DateTime, default=_utcnow, onupdate=_utcnow),
    Index("ix_team_user_user_id", "user_id"),
)


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    personal_team: Mapped[bool] = mapped_column(Boolean, default=False)
    show_boarding: Mapped[bool] = mapped_column(Boolean, default=False)

    smtp_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    smtp_from_address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    smtp_from_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    smtp_recipients: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    smtp_host: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    smtp_port: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    smtp_encryption: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    smtp_username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    smtp_password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    smtp_timeout: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    resend_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    resend_api_key: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    discord_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    discord_webhook_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    telegram_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
    telegram_token: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    telegram_chat_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    custom_server_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=_utcnow, onupdate=_utcnow)

    members: Mapped[list["User"]] = relationship(
        secondary=team_user,
        back_populates="teams",
        order_by="User.id",
    )


if TYPE_CHECKING:  # pragma: no cover
    from app.models.user import User
