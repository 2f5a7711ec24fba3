# config/settings.py
# Application settings, read from INSIGHTS_* environment variables.

import os
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists, for local development.
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class AppSettings(BaseSettings):
    app_name: str = "Personality Insight Engine"
    log_level: str = "INFO"
    json_logs: bool = True
    api_prefix: str = "/api/v1"
    cors_allow_origins: List[str] = ["*"]
    insights_per_category: int = Field(default=3, ge=1, le=3)
    fallback_for_empty_profile: bool = True

    model_config = SettingsConfigDict(env_prefix="INSIGHTS_")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> AppSettings:
    return AppSettings()
