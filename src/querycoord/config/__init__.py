"""Two-tier configuration (static TOML/env + hot-reloadable dynamic keys)."""

from .manager import ConfigManager
from .registry import REGISTRY, ConfigKey

__all__ = ["ConfigManager", "ConfigKey", "REGISTRY"]
