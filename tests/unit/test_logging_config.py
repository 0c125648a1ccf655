"""Unit tests for logging configuration."""

import json
import logging

import pytest

from imgur_client.config.settings import ImgurSettings
from imgur_client.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _format(message: str) -> str:
    record = logging.LogRecord(
        name="imgur_client.client",
        level=logging.INFO,
        pathname="client.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    return json.loads(JsonFormatter().format(record))["message"]


class TestConfigureLogging:
    def test_installs_single_json_handler(self, restore_root_logger):
        """Repeated configuration leaves exactly one JSON handler on root."""
        configure_logging("debug")
        configure_logging("debug")

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        """An unknown level name falls back to INFO."""
        configure_logging("verbose")
        assert restore_root_logger.level == logging.INFO

    def test_level_from_settings(self, restore_root_logger, monkeypatch: pytest.MonkeyPatch):
        """IMGUR_LOG_LEVEL reaches the root logger through configure_logging."""
        monkeypatch.setenv("IMGUR_CLIENT_ID", "abc123")
        monkeypatch.setenv("IMGUR_LOG_LEVEL", "WARNING")

        configure_logging(ImgurSettings().log_level)

        assert restore_root_logger.level == logging.WARNING


class TestRedaction:
    def test_header_value_redacted(self):
        """The value after "Client-ID " is redacted."""
        assert _format("sent Authorization: Client-ID abc123") == "sent [REDACTED]"

    def test_assignment_redacted(self):
        """client_id=<value> and client-id: <value> are redacted."""
        assert "abc123" not in _format("loaded client_id=abc123")
        assert "abc123" not in _format("loaded client-id: abc123")

    @pytest.mark.parametrize(
        "message",
        [
            "client id is missing",
            "the Client ID was rotated yesterday",
            "no client-id configured",
        ],
    )
    def test_prose_mentions_untouched(self, message: str):
        """Plain prose about the client id is left as written."""
        assert _format(message) == message
