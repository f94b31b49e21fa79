"""Configuration keys known to the broker, with tier and validation rules.

Static keys are read once at startup. Dynamic keys can be changed while the
process runs and are pushed to subscribers of the ConfigManager.
"""

from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigKey:
    """
    One registered configuration key.

    Attributes:
        tier: "static" (read at startup) or "dynamic" (hot-reloadable)
        value_type: Expected Python type of the value
        default: Value used when neither TOML nor environment sets the key
        min_value: Inclusive lower bound for numeric keys
        max_value: Inclusive upper bound for numeric keys
        validator: Extra predicate the value must satisfy
        normalizer: Canonicalizes a valid value before it is stored
    """
    tier: Literal["static", "dynamic"]
    value_type: type
    default: Any
    min_value: Optional[Any] = None
    max_value: Optional[Any] = None
    validator: Optional[Callable[[Any], bool]] = None
    normalizer: Optional[Callable[[Any], Any]] = None

    @property
    def restart_required(self) -> bool:
        return self.tier == "static"


REGISTRY: dict[str, ConfigKey] = {
    "broker.timeout_seconds": ConfigKey(
        tier="dynamic",
        value_type=float,
        default=5.0,
        min_value=0.1,
        max_value=300.0,
        normalizer=float,
    ),
    "logging.level": ConfigKey(
        tier="dynamic",
        value_type=str,
        default="INFO",
        validator=lambda v: v.upper() in LOG_LEVELS,
        normalizer=str.upper,
    ),
    "logging.json": ConfigKey(
        tier="static",
        value_type=bool,
        default=False,
    ),
}


def get_config_key(key: str) -> ConfigKey:
    """
    Look up a key definition.

    Raises:
        KeyError: If the key is not registered
    """
    if key not in REGISTRY:
        raise KeyError(f"Configuration key '{key}' not found in registry")
    return REGISTRY[key]


def validate_config_value(key: str, value: Any) -> tuple[bool, Optional[str]]:
    """Check a value against its key definition; returns (is_valid, error_message)."""
    try:
        config_key = get_config_key(key)
    except KeyError as e:
        return False, str(e)

    # ints stand in for floats, bools do not
    if config_key.value_type is float and isinstance(value, int) and not isinstance(value, bool):
        value = float(value)

    if not isinstance(value, config_key.value_type):
        return False, f"Expected type {config_key.value_type.__name__}, got {type(value).__name__}"

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if config_key.min_value is not None and value < config_key.min_value:
            return False, f"Value {value} below minimum {config_key.min_value}"
        if config_key.max_value is not None and value > config_key.max_value:
            return False, f"Value {value} above maximum {config_key.max_value}"

    if config_key.validator is not None and not config_key.validator(value):
        return False, f"Custom validation failed for value: {value}"

    return True, None


def normalize_config_value(key: str, value: Any) -> Any:
    """Return the stored form of an already validated value."""
    config_key = get_config_key(key)
    if config_key.normalizer is None:
        return value
    return config_key.normalizer(value)


def get_default_values() -> dict[str, Any]:
    return {key: config_key.default for key, config_key in REGISTRY.items()}


def get_keys_for_tier(tier: str) -> list[str]:
    return [key for key, config_key in REGISTRY.items() if config_key.tier == tier]
