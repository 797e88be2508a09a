"""Configuration management for Qwery."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # API Settings
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_allowed_origins: str | list[str] = Field(default=["*"], alias="API_ALLOWED_ORIGINS")

    # Database Settings
    database_url: str = Field(default="sqlite+aiosqlite:///./qwery.db", alias="DATABASE_URL")
    database_echo: bool = Field(default=False, alias="DATABASE_ECHO")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # LLM Settings
    llm_model: str = Field(default="azure/gpt-5-mini", alias="LLM_MODEL")
    llm_api_key: str | None = Field(default=None, alias="LLM_API_KEY")
    llm_api_base: str | None = Field(default=None, alias="LLM_API_BASE")
    llm_temperature: float = Field(default=0.0, alias="LLM_TEMPERATURE")
    llm_max_tokens: int = Field(default=4096, alias="LLM_MAX_TOKENS")
    llm_max_retries: int = Field(default=2, alias="LLM_MAX_RETRIES")
    title_generation_timeout: float = Field(default=10.0, alias="TITLE_GENERATION_TIMEOUT")

    # Agent workspace (per-conversation SQLite files live under it)
    workspace: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WORKSPACE", "WORKING_DIR", "workspace"),
    )
    sheet_fetch_timeout: float = Field(default=30.0, alias="SHEET_FETCH_TIMEOUT")

    # Agent registry
    agent_inactivity_timeout: float = Field(default=30 * 60, alias="AGENT_INACTIVITY_TIMEOUT")
    agent_cleanup_interval: float = Field(default=5 * 60, alias="AGENT_CLEANUP_INTERVAL")
    agent_max_steps: int = Field(default=10, alias="AGENT_MAX_STEPS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str:
        if not value:
            return "INFO"
        return str(value).strip().upper()

    @property
    def workspace_path(self) -> Path | None:
        if not self.workspace:
            return None
        return Path(self.workspace)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
