"""
Centralized configuration with environment variable overrides.

Booking windows, the same-day buffer and API defaults live here.
Clients take their base URL as a constructor argument; the value below
is only the default used when none is passed.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from hsm_booking.logging_context import SessionIdFilter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class ApiConfig:
    """REST backend connection defaults."""

    base_url: str = os.getenv("API_BASE_URL", "http://localhost:8000")
    timeout_seconds: float = _safe_float("API_TIMEOUT_SECONDS", "10.0")


@dataclass(frozen=True)
class BookingConfig:
    """Customer booking window and same-day filtering."""

    today_buffer_minutes: int = _safe_int("TODAY_BUFFER_MINUTES", "30")
    booking_window_days: int = _safe_int("BOOKING_WINDOW_DAYS", "3")
    reschedule_window_days: int = _safe_int("RESCHEDULE_WINDOW_DAYS", "7")
    timezone: str = os.getenv("TIMEZONE", "")


@dataclass(frozen=True)
class OnboardingConfig:
    """Provider onboarding defaults."""

    default_slot_interval: int = _safe_int("DEFAULT_SLOT_INTERVAL", "30")
    preview_slot_limit: int = _safe_int("PREVIEW_SLOT_LIMIT", "8")
    default_start_time: str = os.getenv("DEFAULT_START_TIME", "09:00")
    default_end_time: str = os.getenv("DEFAULT_END_TIME", "17:00")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    api: ApiConfig = field(default_factory=ApiConfig)
    booking: BookingConfig = field(default_factory=BookingConfig)
    onboarding: OnboardingConfig = field(default_factory=OnboardingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.api.base_url.startswith(("http://", "https://")):
        raise ValueError(
            f"API_BASE_URL must be an http(s) URL, got {config.api.base_url!r}"
        )
    if config.api.timeout_seconds <= 0:
        raise ValueError(
            f"API_TIMEOUT_SECONDS must be > 0, got {config.api.timeout_seconds}"
        )
    if config.booking.today_buffer_minutes < 0:
        raise ValueError(
            f"TODAY_BUFFER_MINUTES must be >= 0, got {config.booking.today_buffer_minutes}"
        )
    for name, value in [
        ("BOOKING_WINDOW_DAYS", config.booking.booking_window_days),
        ("RESCHEDULE_WINDOW_DAYS", config.booking.reschedule_window_days),
        ("PREVIEW_SLOT_LIMIT", config.onboarding.preview_slot_limit),
    ]:
        if value < 1:
            raise ValueError(f"{name} must be >= 1, got {value}")

    # Mirrors ALLOWED_INTERVALS in scheduling.slot_calculator
    if config.onboarding.default_slot_interval not in (15, 30, 60):
        raise ValueError(
            "DEFAULT_SLOT_INTERVAL must be one of 15, 30, 60, "
            f"got {config.onboarding.default_slot_interval}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Records from third-party loggers need session_id too
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, SessionIdFilter) for f in handler.filters):
            handler.addFilter(SessionIdFilter())
    logger.info("Configuration loaded for API at '%s'", config.api.base_url)
    return config


# Singleton instance
settings = load_config()
