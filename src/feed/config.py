"""Feed service configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class FeedConfig(BaseSettings):
    """Feed configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # HTTP server
    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )
    port: int = Field(
        default=4343,
        description="Port the HTTP server listens on",
    )

    # Epitech intranet
    intra_url: str = Field(
        default="https://intra.epitech.eu",
        description="Intranet base URL, used for planning queries and event links",
    )
    upstream_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for the planning request (no retries are made)",
    )

    # Calendar
    window_days: int = Field(
        default=7,
        ge=1,
        description="Days before and after today covered by the feed",
    )
    display_timezone: str = Field(
        default="Europe/Paris",
        description="Value of the X-WR-TIMEZONE calendar property",
    )
    product_id: str = Field(
        default="-//epitech-ics//NONSGML Epitech Calendar//EN",
        description="PRODID of generated calendars",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: FeedConfig | None = None


def get_config() -> FeedConfig:
    """Get the feed configuration singleton.

    Returns:
        FeedConfig: Feed configuration instance
    """
    global _config
    if _config is None:
        _config = FeedConfig()
    return _config
