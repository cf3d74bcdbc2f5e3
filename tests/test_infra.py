"""
Tests for configuration and structured logging.
"""

import json
import logging

from sanctum.config import Settings, settings
from sanctum.logging import JSONFormatter, TextFormatter, get_logger, setup_logging


class TestSettings:

    def test_defaults(self):
        assert settings.ENGINE_VERSION
        assert settings.MAX_TEXT_LENGTH > 0
        assert isinstance(settings.PORT, int)

    def test_frozen(self):
        import dataclasses
        import pytest
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.PORT = 1

    def test_default_tradition_has_profile(self):
        from sanctum.cultural import CULTURAL_PROFILES
        assert Settings().DEFAULT_TRADITION in CULTURAL_PROFILES


class TestLogging:

    def _record(self, **extra):
        record = logging.LogRecord(
            name="sanctum.test", level=logging.INFO, pathname=__file__, lineno=1,
            msg="hello %s", args=("world",), exc_info=None,
        )
        for key, val in extra.items():
            setattr(record, key, val)
        return record

    def test_json_formatter_fields(self):
        out = json.loads(JSONFormatter().format(self._record(detector="entity", severity=3)))
        assert out["message"] == "hello world"
        assert out["level"] == "INFO"
        assert out["logger"] == "sanctum.test"
        assert out["detector"] == "entity"
        assert out["severity"] == 3
        assert "timestamp" in out

    def test_json_formatter_skips_unknown_extras(self):
        out = json.loads(JSONFormatter().format(self._record(secret="x")))
        assert "secret" not in out

    def test_json_formatter_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = self._record()
            record.exc_info = sys.exc_info()
        out = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in out["exception"]

    def test_get_logger_namespace(self):
        assert get_logger("detector").name == "sanctum.detector"

    def test_setup_logging_json(self):
        root = setup_logging(level="DEBUG", fmt="json")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_text(self):
        root = setup_logging(level="WARNING", fmt="text")
        assert isinstance(root.handlers[0].formatter, TextFormatter)
        assert root.level == logging.WARNING
        setup_logging()

    def test_unknown_format_falls_back_to_text(self):
        root = setup_logging(level="nonsense", fmt="xml")
        assert isinstance(root.handlers[0].formatter, TextFormatter)
        assert root.level == logging.INFO
        setup_logging()

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging()
        root = setup_logging()
        assert len(root.handlers) == 1
