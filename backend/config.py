"""
Configuration management for the order-shipping core.

Loads settings from the environment (or .env) via pydantic-settings.
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.enums import ShippingPolicy

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Application ─────────────────────────────────────────────────
    environment: str = "development"

    # ── Logging ─────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Shipping ────────────────────────────────────────────────────
    # Used when a caller prices a parcel without naming a policy
    default_shipping_policy: ShippingPolicy = ShippingPolicy.SEDEX

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # allow unknown .env keys without crashing
    )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for log_level (e.g. "debug" -> 10)."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"LOG_LEVEL is not a logging level: {self.log_level!r}")
        return level

    def validate_settings(self):
        """
        Validate settings before the entry point configures logging.

        Raises ValueError when LOG_LEVEL does not name a logging level.
        """
        level = self.log_level_number
        logger.debug(
            f"Settings validated (environment={self.environment}, log_level={level}, "
            f"default_shipping_policy={self.default_shipping_policy.value})"
        )


# Global settings instance
settings = Settings()
