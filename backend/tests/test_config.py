"""
Tests for Settings loading and validation.
"""
import pytest

from config import Settings
from domain.enums import ShippingPolicy


class TestSettings:

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("DEFAULT_SHIPPING_POLICY", raising=False)
        s = Settings(_env_file=None)
        assert s.environment == "development"
        assert s.log_level == "INFO"
        assert s.default_shipping_policy == ShippingPolicy.SEDEX

    @pytest.mark.unit
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_SHIPPING_POLICY", "pac")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.default_shipping_policy == ShippingPolicy.PAC
        assert s.log_level_number == 10

    @pytest.mark.unit
    def test_invalid_log_level_rejected(self):
        s = Settings(_env_file=None, log_level="chatty")
        with pytest.raises(ValueError) as exc_info:
            s.validate_settings()
        assert "LOG_LEVEL" in str(exc_info.value)

    @pytest.mark.unit
    def test_valid_settings_pass(self):
        Settings(_env_file=None, log_level="warning").validate_settings()
