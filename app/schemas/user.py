from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserOut(BaseModel):
    """Team member as exposed by the API; credentials and pivot data excluded."""

    id: int
    name: str
    email: str
    email_verified_at: Optional[datetime] = None
    two_factor_confirmed_at: Optional[datetime] = None
    force_password_reset: bool = False
    marketing_emails: bool = True
    current_team_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = {
        "from_attributes": True
    }
