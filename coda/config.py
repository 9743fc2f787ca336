"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    coda_env: str = "development"
    coda_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Serializer defaults when a request carries no export config
    default_tab_size: int = 4
    default_line_break: bool = True

    # Largest accepted document source, in characters
    max_document_chars: int = 1_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
