"""Application configuration via Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

# Resolve .env from the project root regardless of CWD
_ENV_FILE = Path(__file__).resolve().parents[3] / ".env"


class Settings(BaseSettings):
    """Central configuration loaded from environment variables / .env file."""

    app_name: str = "Parametric Foot Form Bot"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Twilio (empty token disables webhook signature validation)
    twilio_auth_token: str = ""
    # Public URL Twilio posts to, when running behind a proxy
    public_base_url: str = ""

    # General
    debug: bool = False

    model_config = {"env_file": str(_ENV_FILE), "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
