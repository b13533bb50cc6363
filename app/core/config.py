import os
from functools import lru_cache

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


class Settings(BaseSettings):
    """Strongly typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Team Access API")
    environment: Literal["dev", "test", "staging", "prod"] = Field(default="dev")
    debug: bool = Field(default=False)
    database_url: str = Field(default="sqlite+pysqlite:///./teams.db")

    jwt_secret_key: str = Field(default_factory=lambda: _load_required_env("JWT_SECRET_KEY"), min_length=8, description="Symmetric key for HS256 JWT signing")
    jwt_algorithm: Literal["HS256"] = Field(default="HS256")
    jwt_issuer: str = Field(default="team-access-api")
    jwt_audience: str = Field(default="team-access-clients")
    access_token_expire_minutes: int = Field(default=60, ge=1)

    docs_base_url: str = Field(default="https://coolify.io/docs/api-reference", description="Base URL for API reference links in error bodies")
    sensitive_ability: str = Field(default="view:sensitive", description="Token ability that reveals team secrets")

    run_startup_ddl: bool = Field(default=True)

    # Database connection pooling settings
    db_pool_size: int = Field(default=5, ge=1, le=50, description="Number of connections to keep in the pool")
    db_max_overflow: int = Field(default=10, ge=0, le=100, description="Max connections to create beyond pool_size")
    db_pool_timeout: int = Field(default=30, ge=1, le=300, description="Seconds to wait for connection from pool")
    db_pool_recycle: int = Field(default=3600, ge=300, description="Seconds before recycling a connection")
    db_pool_pre_ping: bool = Field(default=True, description="Enable connection health checks before use")

    @field_validator("docs_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: object) -> object:
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    def docs_url(self, page: str) -> str:
        return f"{self.docs_base_url}/{page}"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
