import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


logger = logging.getLogger(__name__)


class CustomSettings(BaseSettings):
    """Application settings loaded from environment variables.

    Validates configuration at startup to catch misconfiguration early.
    """

    radio357_url: str = "https://radio357.pl/ramowka"
    rns_url: str = "https://nowyswiat.online/ramowka/"
    user_agent: str = "radio-schedule/0.1.0"
    fetch_timeout_sec: float = 30.0
    script_time_limit_sec: float = 5.0  # CPU budget for the embedded page script
    script_memory_limit_mb: int = 64
    extraction_timeout_sec: float = 30.0  # 0 disables timeout
    schedule_timezone: str | None = None  # None uses the server's local timezone
    frontend_dir: str = "frontend/public"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("radio357_url", "rns_url")
    @classmethod
    def validate_upstream_url(cls, value: str, info) -> str:
        """Validate upstream URLs are HTTP/HTTPS."""
        if not value.lower().startswith(("http://", "https://")):
            raise ValueError(f"{info.field_name} must be HTTP/HTTPS: {value}")
        return value

    @field_validator("fetch_timeout_sec", "script_time_limit_sec", "script_memory_limit_mb")
    @classmethod
    def validate_positive(cls, value, info):
        """Ensure fetch and sandbox limits are positive."""
        if value <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return value

    @field_validator("extraction_timeout_sec")
    @classmethod
    def validate_extraction_timeout(cls, value: float) -> float:
        """Validate extraction timeout (seconds)."""
        if value < 0:
            raise ValueError("extraction_timeout_sec must be >= 0")
        return value

    @field_validator("schedule_timezone", mode="before")
    @classmethod
    def validate_timezone(cls, value):
        """Validate timezone is a known IANA name; blank means local time."""
        if value is None or not str(value).strip():
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(
                f"Invalid timezone: {value}. Must be a valid IANA timezone (e.g., 'Europe/Warsaw')"
            ) from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level name."""
        normalized = value.upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return normalized

    def __init__(self, **data):
        """Initialize settings and log configuration."""
        super().__init__(**data)

        logger.info("Configuration loaded:")
        logger.info("  Radio 357 URL: %s", self.radio357_url)
        logger.info("  RNS URL: %s", self.rns_url)
        logger.info("  Fetch Timeout: %ss", self.fetch_timeout_sec)
        logger.info(
            "  Script Limits: %ss CPU, %s MB memory",
            self.script_time_limit_sec,
            self.script_memory_limit_mb,
        )
        logger.info(
            "  Extraction Timeout: %s",
            f"{self.extraction_timeout_sec}s" if self.extraction_timeout_sec else "disabled",
        )
        logger.info("  Schedule Timezone: %s", self.schedule_timezone or "local")


settings = CustomSettings()


def setup_logging() -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
