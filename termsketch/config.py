"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    termsketch_env: str = "development"
    termsketch_log_level: str = "info"
    termsketch_host: str = "127.0.0.1"
    termsketch_port: int = 8000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Canvas defaults when neither the request nor the terminal gives a size
    default_width: int = 24
    default_height: int = 80
    blank_glyph: str = " "
    max_canvas_cells: int = 250_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
