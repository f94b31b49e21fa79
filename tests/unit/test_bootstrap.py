"""Unit tests for broker startup wiring."""

import json
from unittest.mock import AsyncMock

import pytest
import structlog

from querycoord import CoordinatorBroker, create_broker
from querycoord.clients import DataCoordClient, RootCoordClient


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_create_broker_loads_config(tmp_path, monkeypatch):
    monkeypatch.delenv("QUERYCOORD_BROKER_TIMEOUT_SECONDS", raising=False)
    config_file = tmp_path / "config.toml"
    config_file.write_text("[broker]\ntimeout_seconds = 12.5\n")

    broker = create_broker(
        AsyncMock(spec=DataCoordClient),
        AsyncMock(spec=RootCoordClient),
        config_file=config_file,
        env_file=tmp_path / ".env",
    )

    assert isinstance(broker, CoordinatorBroker)
    assert broker.config_manager.get("broker.timeout_seconds") == 12.5


def test_create_broker_configures_logging(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("QUERYCOORD_LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("QUERYCOORD_LOGGING_JSON", raising=False)
    config_file = tmp_path / "config.toml"
    config_file.write_text('[logging]\nlevel = "warning"\njson = true\n')

    create_broker(None, None, config_file=config_file, env_file=tmp_path / ".env")
    capsys.readouterr()

    logger = structlog.get_logger("test")
    logger.info("hidden_event")
    logger.warning("visible_event")
    lines = capsys.readouterr().out.strip().splitlines()

    assert [json.loads(line)["event"] for line in lines] == ["visible_event"]


def test_create_broker_rejects_invalid_config(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text('[logging]\nlevel = "LOUD"\n')

    with pytest.raises(ValueError, match="logging.level"):
        create_broker(None, None, config_file=config_file, env_file=tmp_path / ".env")
