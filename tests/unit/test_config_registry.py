"""Unit tests for configuration registry."""

import pytest

from querycoord.config.registry import (
    REGISTRY,
    ConfigKey,
    get_config_key,
    get_default_values,
    get_keys_for_tier,
    normalize_config_value,
    validate_config_value,
)


class TestConfigKey:
    """Test ConfigKey dataclass."""

    def test_static_key_requires_restart(self):
        assert ConfigKey(tier="static", value_type=str, default="x").restart_required is True

    def test_dynamic_key_hot_reloadable(self):
        assert ConfigKey(tier="dynamic", value_type=int, default=1).restart_required is False


class TestRegistry:
    """Test configuration registry."""

    def test_registered_keys(self):
        assert set(REGISTRY) == {"broker.timeout_seconds", "logging.level", "logging.json"}

    def test_defaults_are_valid(self):
        """Every registered default must pass its own validation."""
        for key, value in get_default_values().items():
            is_valid, error = validate_config_value(key, value)
            assert is_valid, f"{key}: {error}"

    def test_tiers(self):
        assert get_keys_for_tier("static") == ["logging.json"]
        assert set(get_keys_for_tier("dynamic")) == {"broker.timeout_seconds", "logging.level"}

    def test_get_existing_key(self):
        assert get_config_key("logging.json").tier == "static"

    def test_get_nonexistent_key_raises_error(self):
        with pytest.raises(KeyError, match="not found in registry"):
            get_config_key("nonexistent.key")


class TestValidateConfigValue:
    """Test validate_config_value function."""

    def test_validate_correct_type(self):
        assert validate_config_value("logging.level", "INFO") == (True, None)

    def test_validate_level_case_insensitive(self):
        assert validate_config_value("logging.level", "debug") == (True, None)

    def test_validate_wrong_type(self):
        is_valid, error = validate_config_value("logging.level", 10)
        assert is_valid is False
        assert "Expected type str" in error

    def test_validate_int_for_float(self):
        assert validate_config_value("broker.timeout_seconds", 3) == (True, None)

    def test_validate_bool_is_not_a_float(self):
        is_valid, _ = validate_config_value("broker.timeout_seconds", True)
        assert is_valid is False

    def test_validate_range(self):
        is_valid, error = validate_config_value("broker.timeout_seconds", 0.05)
        assert is_valid is False
        assert "below minimum" in error

    def test_validate_custom_validator(self):
        is_valid, error = validate_config_value("logging.level", "VERBOSE")
        assert is_valid is False
        assert "Custom validation failed" in error

    def test_validate_unknown_key(self):
        is_valid, error = validate_config_value("nonexistent.key", 1)
        assert is_valid is False
        assert "not found in registry" in error


class TestNormalizeConfigValue:

    def test_level_uppercased(self):
        assert normalize_config_value("logging.level", "warning") == "WARNING"

    def test_timeout_becomes_float(self):
        value = normalize_config_value("broker.timeout_seconds", 3)
        assert value == 3.0
        assert isinstance(value, float)

    def test_key_without_normalizer_unchanged(self):
        assert normalize_config_value("logging.json", True) is True
