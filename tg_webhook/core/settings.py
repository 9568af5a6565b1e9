"""Application settings and configuration."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_testing() -> bool:
    """Check if we're running in a test environment."""
    import sys

    return "pytest" in sys.modules


class Settings(BaseSettings):
    """Application settings.

    Read once at process start and handed to the app factory; nothing in the
    request path reads the environment directly.
    """

    model_config = SettingsConfigDict(
        env_file=".env" if not _is_testing() else None,  # Don't load .env in tests
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Application
    service_name: str = Field(default="tg-webhook", description="Service name in logs")
    log_level: str = Field(default="INFO", description="Logging level")

    # Metrics
    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")

    # Telegram
    telegram_webhook_secret: str | None = Field(
        default=None, description="Shared secret expected on webhook calls"
    )

    # Deployment
    preview_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CF_PAGES_URL", "PREVIEW_URL"),
        description="URL of a preview (non-production) deployment",
    )
    log_updates: bool = Field(
        default=False, description="Log inbound updates regardless of deployment"
    )

    @property
    def secret_required(self) -> bool:
        """Whether webhook calls must carry the shared secret."""
        return bool(self.telegram_webhook_secret)

    @property
    def is_preview(self) -> bool:
        """Whether this is a non-production deployment."""
        return bool(self.preview_url) or self.log_updates

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
