"""Process startup: load configuration, set up logging, build the broker."""

from pathlib import Path
from typing import Optional

import structlog

from .broker import CoordinatorBroker
from .clients.protocols import DataCoordClient, RootCoordClient
from .config.manager import ConfigManager
from .logging_config import configure_from_config

logger = structlog.get_logger(__name__)


def create_broker(
    data_coord: Optional[DataCoordClient],
    root_coord: Optional[RootCoordClient],
    *,
    config_file: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> CoordinatorBroker:
    """
    Build a CoordinatorBroker wired to a freshly loaded configuration.

    Logging is configured from ``logging.*`` and follows later
    ``logging.level`` updates made through ``broker.config_manager``.

    Raises:
        ValueError: If the configuration fails to parse or validate
    """
    config_manager = ConfigManager(config_file, env_file)
    config_manager.load()
    configure_from_config(config_manager)

    logger.info(
        "coordinator_broker_created",
        has_data_coord=data_coord is not None,
        has_root_coord=root_coord is not None,
        timeout_seconds=config_manager.get("broker.timeout_seconds"),
    )
    return CoordinatorBroker(data_coord, root_coord, config_manager=config_manager)
