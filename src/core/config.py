"""
Application configuration using Pydantic Settings.

Every field can be overridden by an environment variable of the same name
(e.g. DATABASE_URL, ADMIN_TOKENS) or by a ``.env`` file in the working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    project_name: str = "CRUD Backend"
    api_version: str = "1.0.0"
    log_level: str = "INFO"

    database_url: str = "sqlite:///./crud_backend.db"
    echo_sql: bool = False

    # Comma-separated bearer tokens. Issuing them is someone else's job, we only map them to roles.
    user_tokens: str = Field(default="", description="Tokens granted the USER role")
    admin_tokens: str = Field(default="", description="Tokens granted the ADMIN (and USER) role")

    def user_token_set(self) -> frozenset[str]:
        return _split_tokens(self.user_tokens)

    def admin_token_set(self) -> frozenset[str]:
        return _split_tokens(self.admin_tokens)


def _split_tokens(raw: str) -> frozenset[str]:
    return frozenset(token.strip() for token in raw.split(",") if token.strip())


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process. Use as a FastAPI dependency so tests can override it."""
    return Settings()
