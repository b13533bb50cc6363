from pydantic import BaseModel, Field, field_validator


class TokenClaims(BaseModel):
    """Claims this API reads from a validated bearer token."""

    sub: str
    team_id: int | None = None
    abilities: list[str] = Field(default_factory=list)

    @field_validator("sub", mode="before")
    @classmethod
    def _coerce_subject(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def user_id(self) -> int:
        return int(self.sub)
