"""Configuration settings loaded from environment variables."""

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://stations.windy.com/pws/update"


class WindyConfig(BaseSettings):
    """Windy stations API configuration."""

    api_key: str = ""  # Never validated locally, embedded in the URL path
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    user_agent: str = "windy-station/0.1.0"

    model_config = {"env_prefix": "WINDY_"}


class Settings(BaseSettings):
    """Application settings combining all configs."""

    log_level: str = "INFO"
    windy: WindyConfig = WindyConfig()


def get_settings() -> Settings:
    """Load settings from environment."""
    return Settings()
