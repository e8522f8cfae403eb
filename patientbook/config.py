"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PatientBookSettings(BaseSettings):
    """Settings loaded from ``PATIENTBOOK_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="PATIENTBOOK_", case_sensitive=False)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept log levels in any case."""
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> PatientBookSettings:
    """Get the process-wide settings instance."""
    return PatientBookSettings()
