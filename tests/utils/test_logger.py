"""Tests for logging setup."""
import json

from loguru import logger

from keranjang.config.settings import KeranjangSettings
from keranjang.utils.logger import configure_logging, get_logger


def test_get_logger_namespaces_names():
    names = []
    sink = logger.add(lambda message: names.append(message.record["extra"]["name"]), level="INFO")
    try:
        get_logger("ItemService").info("ping")
        get_logger("keranjang.parser").info("ping")
    finally:
        logger.remove(sink)
    assert names == ["keranjang.ItemService", "keranjang.parser"]


def test_file_handler_only_when_configured(tmp_path):
    """Test the JSON file handler follows LOG_FILE."""
    try:
        assert len(configure_logging(KeranjangSettings(_env_file=None))) == 1

        log_file = tmp_path / "logs" / "keranjang.log"
        ids = configure_logging(KeranjangSettings(_env_file=None, LOG_FILE=log_file))
        assert len(ids) == 2

        get_logger("tests").info("list created", list_count=1)
        # Removing the handlers flushes the enqueued file writes
        configure_logging(KeranjangSettings(_env_file=None))

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[0])
        assert entry["record"]["message"] == "list created"
        assert entry["record"]["extra"]["list_count"] == 1
        assert entry["record"]["extra"]["name"] == "keranjang.tests"
    finally:
        configure_logging()
