"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transport_cli.adapters.opendata_api.constants import OPENDATA_BASE_URL

# The connections endpoint accepts between 1 and 16 results per request
MIN_API_LIMIT = 1
MAX_API_LIMIT = 16

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every field can be set through an environment variable prefixed with
    ``TRANSPORT_`` (e.g. ``TRANSPORT_API_TIMEOUT=5``).
    """

    model_config = SettingsConfigDict(
        env_prefix="TRANSPORT_",
        case_sensitive=False,
        extra="ignore",
    )

    # API configuration
    api_base_url: str = Field(
        default=OPENDATA_BASE_URL,
        description="Base URL of the transport.opendata.ch API",
    )
    api_timeout: float = Field(
        default=10, description="Total timeout for API requests in seconds"
    )
    api_limit: int | None = Field(
        default=None,
        description="Number of connections to request (1-16, unset for the API default)",
    )

    # Display configuration
    show_banner: bool = Field(default=True, description="Print the welcome banner")

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Log level for stderr output")
    log_requests: bool = Field(
        default=False, description="Log outgoing API requests at INFO level"
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate the base URL uses http(s) and strip any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_base_url must start with 'http://' or 'https://'")
        return v.rstrip("/")

    @field_validator("api_timeout")
    @classmethod
    def validate_api_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("api_timeout must be greater than 0")
        return v

    @field_validator("api_limit")
    @classmethod
    def validate_api_limit(cls, v: int | None) -> int | None:
        """Validate limit is within the range accepted by the API."""
        if v is not None and not MIN_API_LIMIT <= v <= MAX_API_LIMIT:
            raise ValueError(f"api_limit must be between {MIN_API_LIMIT} and {MAX_API_LIMIT}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def connections_url(self) -> str:
        """Full URL of the connections endpoint."""
        return f"{self.api_base_url}/connections"
