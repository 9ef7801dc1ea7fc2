"""Tests for configuration loading and validation."""

import pytest

from hsm_booking.config import (
    ApiConfig,
    AppConfig,
    BookingConfig,
    OnboardingConfig,
    _validate_config,
)


def _config(api=None, booking=None, onboarding=None) -> AppConfig:
    config = AppConfig.__new__(AppConfig)
    object.__setattr__(config, "api", api or ApiConfig())
    object.__setattr__(config, "booking", booking or BookingConfig())
    object.__setattr__(config, "onboarding", onboarding or OnboardingConfig())
    object.__setattr__(config, "log_level", "INFO")
    return config


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_defaults(self):
        config = AppConfig()
        assert config.booking.booking_window_days == 3
        assert config.booking.reschedule_window_days == 7
        assert config.onboarding.default_slot_interval in (15, 30, 60)

    def test_invalid_base_url(self):
        with pytest.raises(ValueError, match="API_BASE_URL"):
            _validate_config(_config(api=ApiConfig(base_url="localhost:8000")))

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="API_TIMEOUT_SECONDS"):
            _validate_config(_config(api=ApiConfig(timeout_seconds=0)))

    def test_negative_buffer(self):
        with pytest.raises(ValueError, match="TODAY_BUFFER_MINUTES"):
            _validate_config(_config(booking=BookingConfig(today_buffer_minutes=-5)))

    def test_zero_buffer_allowed(self):
        _validate_config(_config(booking=BookingConfig(today_buffer_minutes=0)))

    def test_empty_booking_window(self):
        with pytest.raises(ValueError, match="BOOKING_WINDOW_DAYS"):
            _validate_config(_config(booking=BookingConfig(booking_window_days=0)))

    def test_unsupported_default_interval(self):
        with pytest.raises(ValueError, match="DEFAULT_SLOT_INTERVAL"):
            _validate_config(_config(onboarding=OnboardingConfig(default_slot_interval=45)))

    def test_safe_int_parsing(self):
        from hsm_booking.config import _safe_int

        assert _safe_int("NONEXISTENT_VAR_12345", "42") == 42

    def test_safe_int_rejects_garbage(self, monkeypatch):
        from hsm_booking.config import _safe_int

        monkeypatch.setenv("HSM_TEST_BAD_INT", "thirty")
        with pytest.raises(ValueError, match="HSM_TEST_BAD_INT"):
            _safe_int("HSM_TEST_BAD_INT", "30")

    def test_safe_float_parsing(self):
        from hsm_booking.config import _safe_float

        assert _safe_float("NONEXISTENT_VAR_12345", "2.5") == pytest.approx(2.5)


class TestLogging:
    def test_root_handlers_carry_session_id(self):
        import logging

        from hsm_booking.config import load_config
        from hsm_booking.logging_context import SessionIdFilter, set_session_id

        load_config()
        handlers = logging.getLogger().handlers
        assert handlers
        for handler in handlers:
            assert any(isinstance(f, SessionIdFilter) for f in handler.filters)

        set_session_id("ONBOARD-abc123")
        record = logging.LogRecord("httpx", logging.INFO, __file__, 1, "GET /slots", None, None)
        session_filter = next(f for f in handlers[0].filters if isinstance(f, SessionIdFilter))
        assert session_filter.filter(record)
        assert record.session_id == "ONBOARD-abc123"
