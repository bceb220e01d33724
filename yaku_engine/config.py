from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    decomposition_strategy: Literal["first_found", "exhaustive"] = "first_found"
    log_level: str = "INFO"
    log_dir: str | None = None
    log_format: str = LOG_FORMAT

    model_config = SettingsConfigDict(
        env_prefix="YAKU_ENGINE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
