"""Server configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the GKG MCP server.

    Every field can be overridden with an environment variable of the same
    name (case-insensitive), e.g. ``PORT=8080``.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 27495
    debug: bool = False
    environment: str = "development"

    # Logging
    log_level: str = "INFO"

    # SSE heartbeat period in seconds
    sse_heartbeat_interval: float = Field(default=30.0, gt=0)

    # Error tracking (optional)
    sentry_dsn: str | None = None


settings = Settings()
