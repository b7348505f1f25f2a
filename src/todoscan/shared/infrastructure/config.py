"""
Application configuration using Pydantic Settings.

Loads configuration from TODOSCAN_* environment variables and a .env file.
Only the CLI and logging layers read these settings; the scanner core takes
explicit parameters.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TODOSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="todoscan", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="WARNING", description="Logging level")

    # Scanning defaults
    charset: str = Field(
        default="utf-8",
        description="Character set used to decode files, or 'detect'",
    )
    todo_types: str = Field(
        default="",
        description="Comma separated TODO types (empty uses the built-in defaults)",
    )
    output: str = Field(default="default", description="Output format (default/github/json)")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Fail fast on unknown log levels."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if value.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}, got {value!r}")
        return value.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def type_list(self) -> list[str]:
        """TODO types parsed from the comma separated setting."""
        return [t.strip() for t in self.todo_types.split(",") if t.strip()]


# Global settings instance
settings = Settings()
