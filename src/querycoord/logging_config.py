"""Structlog setup and runtime log-level control."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .config.manager import ConfigManager
from .config.registry import LOG_LEVELS

_json_output = False


def _level_value(level: str) -> int:
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    return logging.getLevelName(normalized)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines instead of the console renderer
    """
    global _json_output
    _json_output = json_output

    renderer: Any = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


def set_log_level(level: str) -> None:
    """Change the minimum log level at runtime, keeping the output format."""
    configure_logging(level, _json_output)
    structlog.get_logger(__name__).info("log_level_changed", level=level.upper())


def configure_from_config(config_manager: ConfigManager) -> None:
    """
    Apply logging settings from config and follow later ``logging.level`` updates.

    Args:
        config_manager: Loaded configuration manager
    """
    configure_logging(
        level=config_manager.get("logging.level"),
        json_output=config_manager.get("logging.json"),
    )

    def _on_config_updated(key: str, value: Any) -> None:
        if key == "logging.level":
            set_log_level(value)

    config_manager.subscribe(_on_config_updated)
