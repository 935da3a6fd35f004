from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AUTODAZZLER_", case_sensitive=False)

    host: str | None = Field(
        default=None, description="Host factory in MODULE:ATTR form"
    )
    abort_prompt_timeout_s: float = Field(default=15.0, ge=0)
    countdown_interval_ms: int = Field(default=500, gt=0)
    quit_delay_ms: int = Field(default=1500, ge=0)
    success_sound: Path | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
