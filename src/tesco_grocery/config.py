"""Client configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

STABLE_API_URL = "https://secure.techfortesco.com/groceryapi_b1/restservice.aspx"
NIGHTLY_API_URL = "https://secure.techfortesco.com/groceryapi/restservice.aspx"
OPS_API_URL = "https://secure.techfortesco.com/groceryapi_ops/restservice.aspx"
DEFAULT_API_URL = OPS_API_URL


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    developer_key: str
    application_key: str
    api_url: str = DEFAULT_API_URL
    request_timeout_seconds: float = 15.0
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="TESCO_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
