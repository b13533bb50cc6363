from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


# Hidden unless the caller's token grants the sensitive ability.
SENSITIVE_TEAM_FIELDS: frozenset[str] = frozenset(
    {"smtp_username", "smtp_password", "resend_api_key", "telegram_token"}
)


class TeamOut(BaseModel):
    """Public projection of a team.

    ``custom_server_limit`` and membership pivot data are intentionally not
    declared, so they can never be serialized.
    """

    id: int
    name: str
    description: Optional[str] = None
    personal_team: bool = False
    show_boarding: bool = False

    smtp_enabled: bool = False
    smtp_from_address: Optional[str] = None
    smtp_from_name: Optional[str] = None
    smtp_recipients: Optional[str] = None
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    smtp_encryption: Optional[str] = None
    smtp_username: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_timeout: Optional[int] = None

    resend_enabled: bool = False
    resend_api_key: Optional[str] = None

    discord_enabled: bool = False
    discord_webhook_url: Optional[str] = None

    telegram_enabled: bool = False
    telegram_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = {"from_attributes": True}
