"""Runtime configuration for the API.

Uses Pydantic BaseSettings to read environment variables with the
`PLAYER_API_` prefix.

Example:
    export PLAYER_API_PORT=3000
    export PLAYER_API_CORS_ALLOW_ALL=true
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from environment variables.

    Attributes:
        host (str): Interface the server binds to; shown in the startup banner.
        port (int): TCP port the server listens on.
        cors_allow_all (bool): Whether to allow all CORS origins.
    """

    model_config = SettingsConfigDict(env_prefix="PLAYER_API_")

    host: str = "localhost"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_allow_all: bool = False


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
