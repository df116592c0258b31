# path: osm-feature-extractor/app/core/config.py

"""
Service configuration, loaded from environment variables or a local .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_host: str = "0.0.0.0"
    app_port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    overpass_url: str = "https://overpass-api.de/api/interpreter"
    overpass_timeout_s: float = 180.0
    overpass_user_agent: str = "osm-feature-extractor/1.0"

    # Reported as metadata.source on every feature collection
    data_source: str = "OpenStreetMap via Overpass API"


settings = Settings()
