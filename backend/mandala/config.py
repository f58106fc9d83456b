"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    mandala_env: str = "development"
    mandala_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Decimal places for exported metric values
    export_precision: int = 4

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
