"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Reference datasets (read once at startup)
    communes_path: str = "data/communes.json"
    stations_path: str = "data/gares.geojson"

    # Comparison engine
    default_speed_kmh: float = 90.0  # used when a mode has no speed

    # API
    station_marker_limit: int = 200
    search_limit: int = 10
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
