"""Tests for loguru configuration."""

import logging
import sys

import pytest
from loguru import logger

from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.runtime.config.config_data import AppConfig, ConfigData


@pytest.fixture
def restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_console_sink_writes_to_stdout(capsys, restore_loguru):
    configure_logging(ConfigData(app=AppConfig(environment="test")))

    logger.info("--> Request: GET /test")

    captured = capsys.readouterr()
    assert "--> Request: GET /test" in captured.out
    assert "--> Request: GET /test" not in captured.err


def test_stdlib_records_forwarded(capsys, restore_loguru):
    configure_logging(ConfigData(app=AppConfig(environment="test")))

    logging.getLogger("product_api.tests").warning("from stdlib")

    assert "from stdlib" in capsys.readouterr().out


def test_file_sink(tmp_path, restore_loguru):
    log_file = tmp_path / "logs" / "app.log"
    config = ConfigData(app=AppConfig(environment="test"))
    config.logging.file = str(log_file)

    configure_logging(config)
    logger.info("written to file")
    logger.complete()

    assert "written to file" in log_file.read_text()
