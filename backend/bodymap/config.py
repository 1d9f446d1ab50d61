"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_CATALOG = Path(__file__).parent / "data" / "regions.json"


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Static region definitions
    catalog_path: Path = _DEFAULT_CATALOG

    # Points per curve when flattening paths for hit-testing
    curve_samples: int = 16

    # Diagram defaults
    palette: list[str] = ["#0984e3", "#74b9ff"]
    default_fill: str = "#3f3f3f"
    disabled_fill: str = "#ebebe4"
    border_color: str = "#dfdfdf"
    disabled_group: str = "skeletal_etc"

    model_config = SettingsConfigDict(env_prefix="BODYMAP_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
