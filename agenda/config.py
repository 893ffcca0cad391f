"""Centralized configuration loaded from environment variables."""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings sourced from .env / environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── General ──────────────────────────────────────────────────────
    agenda_env: str = "development"
    agenda_log_level: str = "INFO"

    # ── Recurrence ───────────────────────────────────────────────────
    # Default horizon when listing occurrences of an unbounded event
    agenda_probe_window_days: int = Field(default=730, ge=1)

    @property
    def is_production(self) -> bool:
        """Whether logs should be rendered as JSON."""
        return self.agenda_env == "production"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
