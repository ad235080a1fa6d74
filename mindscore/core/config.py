"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application environment
    env: Literal["dev", "test", "staging", "prod"] = "dev"

    # Database
    database_url: str = "sqlite+aiosqlite:///./mindscore.db"

    # Security
    secret_key: str = "CHANGE_ME_IN_PRODUCTION"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Rate limiting
    rate_limit_enabled: bool = True

    # Logging
    log_level: str = "INFO"

    # Database initialization
    init_db_on_startup: bool = True

    # CORS origin for the web front end
    frontend_url: str = "http://localhost:3000"

    # Crisis line named in safety recommendations and next steps
    crisis_line_text: str = "988 (Suicide & Crisis Lifeline)"

    # Severity colour palette returned to clients
    severity_palette: Literal["clinical", "pastel"] = "clinical"

    @property
    def is_dev(self) -> bool:
        """Check if running in development mode."""
        return self.env == "dev"

    @property
    def is_prod(self) -> bool:
        """Check if running in production mode."""
        return self.env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
