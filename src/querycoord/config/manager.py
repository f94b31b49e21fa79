"""Configuration manager for the broker process.

Values are resolved once by ``load()`` with the precedence
registry default < ``config/default.toml`` < ``QUERYCOORD_*`` environment
(a ``.env`` file is folded into the environment first). Dynamic keys can
then be changed with ``update_dynamic_config``, which notifies subscribers
such as the log-level hook in ``querycoord.logging_config``.
"""

import asyncio
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import structlog
from dotenv import load_dotenv

from .registry import (
    get_config_key,
    get_default_values,
    get_keys_for_tier,
    normalize_config_value,
    validate_config_value,
)

logger = structlog.get_logger(__name__)

ENV_PREFIX = "QUERYCOORD_"
DEFAULT_CONFIG_FILE = Path("config/default.toml")
DEFAULT_ENV_FILE = Path(".env")

Subscriber = Callable[[str, Any], Any]


def env_var_name(key: str) -> str:
    """``broker.timeout_seconds`` -> ``QUERYCOORD_BROKER_TIMEOUT_SECONDS``."""
    return ENV_PREFIX + key.replace(".", "_").upper()


def flatten_toml(data: dict, prefix: str = "") -> dict[str, Any]:
    """Flatten nested TOML tables into dotted keys."""
    flat: dict[str, Any] = {}
    for name, value in data.items():
        dotted = f"{prefix}.{name}" if prefix else name
        if isinstance(value, dict):
            flat.update(flatten_toml(value, dotted))
        else:
            flat[dotted] = value
    return flat


def parse_env_value(raw: str, target_type: type) -> Any:
    """
    Convert an environment string to the registered type.

    Raises:
        ValueError: If the string does not parse as ``target_type``
    """
    if target_type is bool:
        return raw.strip().lower() in ("true", "1", "yes", "on")
    if target_type in (int, float):
        return target_type(raw)
    if target_type is str:
        return raw
    raise ValueError(f"Unsupported type for env parsing: {target_type}")


class ConfigManager:
    """
    Holds resolved static and dynamic configuration.

    Attributes:
        static_config: Keys fixed for the life of the process
        dynamic_config: Keys that ``update_dynamic_config`` may change
    """

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        self.config_file = config_file if config_file is not None else DEFAULT_CONFIG_FILE
        self.env_file = env_file if env_file is not None else DEFAULT_ENV_FILE
        self.static_config: dict[str, Any] = {}
        self.dynamic_config: dict[str, Any] = {}
        self._subscribers: list[Subscriber] = []

    def load(self) -> None:
        """
        Resolve every registered key from defaults, TOML and environment.

        Raises:
            ValueError: If a value fails to parse or validate
        """
        if self.env_file.exists():
            load_dotenv(self.env_file)
            logger.info("env_file_loaded", env_file=str(self.env_file))

        from_file = self._read_toml()
        self.static_config = self._resolve("static", from_file)
        self.dynamic_config = self._resolve("dynamic", from_file)
        logger.info(
            "config_loaded",
            config_file=str(self.config_file),
            static_keys=len(self.static_config),
            dynamic_keys=len(self.dynamic_config),
        )

    def _resolve(self, tier: str, from_file: dict[str, Any]) -> dict[str, Any]:
        defaults = get_default_values()
        resolved = {}
        for key in get_keys_for_tier(tier):
            value = from_file.get(key, defaults[key])

            env_key = env_var_name(key)
            raw = os.getenv(env_key)
            if raw is not None:
                try:
                    value = parse_env_value(raw, get_config_key(key).value_type)
                except ValueError as e:
                    logger.error("env_parse_error", key=key, env_key=env_key, error=str(e))
                    raise ValueError(f"Failed to parse env var {env_key}: {e}") from e
                logger.info("env_override_applied", key=key, env_key=env_key)

            is_valid, error_msg = validate_config_value(key, value)
            if not is_valid:
                logger.error("config_validation_failed", key=key, tier=tier, error=error_msg)
                raise ValueError(f"Invalid {tier} config '{key}': {error_msg}")
            resolved[key] = normalize_config_value(key, value)
        return resolved

    def _read_toml(self) -> dict[str, Any]:
        if not self.config_file.exists():
            logger.warning("config_file_not_found", config_file=str(self.config_file))
            return {}
        with open(self.config_file, "rb") as f:
            return flatten_toml(tomllib.load(f))

    async def update_dynamic_config(self, key: str, value: Any) -> None:
        """
        Change a dynamic key and notify subscribers with the stored value.

        Raises:
            KeyError: If the key is unknown or static
            ValueError: If the value fails validation
        """
        if get_config_key(key).tier != "dynamic":
            raise KeyError(f"Cannot hot-update static config key '{key}' - restart required")

        is_valid, error_msg = validate_config_value(key, value)
        if not is_valid:
            raise ValueError(f"Config validation failed for '{key}': {error_msg}")

        value = normalize_config_value(key, value)
        old_value = self.dynamic_config.get(key)
        self.dynamic_config[key] = value
        logger.info("dynamic_config_updated", key=key, old_value=old_value, new_value=value)

        for subscriber in self._subscribers:
            try:
                result = subscriber(key, value)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(
                    "subscriber_notification_failed",
                    key=key,
                    subscriber=getattr(subscriber, "__name__", repr(subscriber)),
                    error=str(e),
                )

    def subscribe(self, callback: Subscriber) -> None:
        """Register ``callback(key, value)``; coroutine callbacks are awaited."""
        self._subscribers.append(callback)

    def get(self, key: str) -> Any:
        """
        Current value of a key, or its registry default before ``load()``.

        Raises:
            KeyError: If the key is not registered
        """
        config_key = get_config_key(key)
        values = self.static_config if config_key.tier == "static" else self.dynamic_config
        return values.get(key, config_key.default)
