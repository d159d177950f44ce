"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    arrayplot_env: str = "development"
    arrayplot_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:8888"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
