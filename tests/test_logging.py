"""Tests for logging setup, payload logging and configuration."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from claude_wire.config import Settings, settings
from claude_wire.middleware import ApiKey, MissingApiKeyError, auth_headers, mask_headers
from claude_wire.utils import log_incoming_response, log_outgoing_request, reset_logging, setup_logging
from claude_wire.utils.log_config import CLIENT_LOGGERS
from claude_wire.utils.debug_logger import _truncate

from conftest import TEST_API_KEY


@pytest.fixture
def client_loggers():
    """Return the client's loggers and undo any setup afterwards."""
    yield [logging.getLogger(name) for name in CLIENT_LOGGERS]
    reset_logging()


class TestSetupLogging:
    """Test opt-in output for the client's loggers."""

    def test_root_logger_untouched(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        assert setup_logging() is None
        assert root.handlers == handlers
        assert root.level == level

    def test_console_handler_per_logger(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        monkeypatch.setattr(settings, "DEBUG_MODE", False)
        setup_logging()
        for logger in client_loggers:
            assert logger.level == logging.INFO
            assert len(logger.handlers) == 1
            assert not logger.propagate

    def test_debug_mode_level(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        monkeypatch.setattr(settings, "DEBUG_MODE", True)
        setup_logging()
        assert all(logger.level == logging.DEBUG for logger in client_loggers)

    def test_repeat_call_replaces_handlers(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        setup_logging()
        setup_logging()
        assert all(len(logger.handlers) == 1 for logger in client_loggers)

    def test_foreign_handlers_kept(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        foreign = logging.NullHandler()
        client_loggers[0].addHandler(foreign)
        try:
            setup_logging()
            reset_logging()
            assert client_loggers[0].handlers == [foreign]
        finally:
            client_loggers[0].removeHandler(foreign)

    def test_file_handler(self, monkeypatch, client_loggers, tmp_path):
        monkeypatch.setattr(settings, "LOG_TO_FILE", True)
        log_path = setup_logging(log_dir=str(tmp_path / "logs"), console=False)
        assert log_path == str((tmp_path / "logs").resolve() / settings.LOG_FILE)
        for logger in client_loggers:
            assert [type(h) for h in logger.handlers] == [RotatingFileHandler]

        logging.getLogger("claude_wire.services.client").info("written to file")
        for logger in client_loggers:
            for handler in logger.handlers:
                handler.flush()
        with open(log_path, encoding="utf-8") as f:
            assert "written to file" in f.read()

    def test_reset_restores_propagation(self, monkeypatch, client_loggers):
        monkeypatch.setattr(settings, "LOG_TO_FILE", False)
        setup_logging()
        reset_logging()
        for logger in client_loggers:
            assert logger.propagate
            assert logger.handlers == []


class TestPayloadLogging:
    """Test request/response payload logging."""

    def test_disabled_by_default(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "DEBUG_LOG_PAYLOADS", False)
        with caplog.at_level(logging.DEBUG, logger="debug.payloads"):
            log_outgoing_request("req_1", "POST", "http://test/v1/messages", body={"a": 1})
        assert caplog.records == []

    def test_api_key_masked(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "DEBUG_LOG_PAYLOADS", True)
        headers = auth_headers(ApiKey(TEST_API_KEY))
        with caplog.at_level(logging.INFO, logger="debug.payloads"):
            log_outgoing_request("req_1", "POST", "http://test/v1/messages", headers=headers, body={"a": 1})
        assert "req_1" in caplog.text
        assert TEST_API_KEY not in caplog.text

    def test_response_logged(self, monkeypatch, caplog):
        monkeypatch.setattr(settings, "DEBUG_LOG_PAYLOADS", True)
        with caplog.at_level(logging.INFO, logger="debug.payloads"):
            log_incoming_response("req_2", 200, is_stream=True)
        assert "Status: 200" in caplog.text
        assert "<streaming response>" in caplog.text

    def test_truncate(self):
        assert _truncate("abcdef", 3).startswith("abc... [truncated, total 6 chars]")
        assert _truncate("abc", 0) == "abc"


class TestAuthHeaders:
    """Test fixed request headers."""

    def test_headers(self):
        headers = auth_headers(ApiKey(TEST_API_KEY), "2023-06-01")
        assert headers == {
            "x-api-key": TEST_API_KEY,
            "anthropic-version": "2023-06-01",
            "content-type": "application/json",
        }

    def test_mask_headers(self):
        masked = mask_headers({"x-api-key": "secret", "Authorization": "Bearer x", "accept": "*/*"})
        assert masked == {"x-api-key": "***", "Authorization": "***", "accept": "*/*"}

    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "sk-from-env-0000")
        assert ApiKey.from_env("sk-explicit-1111").value == "sk-explicit-1111"
        assert ApiKey.from_env().value == "sk-from-env-0000"

    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(settings, "ANTHROPIC_API_KEY", "")
        with pytest.raises(MissingApiKeyError):
            ApiKey.from_env()


class TestSettings:
    """Test configuration defaults."""

    def test_model_alias_resolution(self):
        assert Settings.resolve_model("claude-opus-4-1") == "claude-opus-4-1-20250805"
        assert Settings.resolve_model("claude-3-haiku-20240307") == "claude-3-haiku-20240307"

    def test_endpoint_defaults(self):
        assert settings.MESSAGES_PATH == "/v1/messages"
        assert settings.REQUEST_TIMEOUT > 0
