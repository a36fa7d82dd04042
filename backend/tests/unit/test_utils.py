"""Tests for id generation, phrases and logging setup."""

import logging
import re
from logging.handlers import RotatingFileHandler

import pytest
from factories import make_settings

from portal.settings import Settings
from portal.utils import generate_id, get_logger, get_timestamp_ms, setup_logging, t


class TestIdGenerator:
    def test_format(self):
        assert re.fullmatch(r"folder_[0-9a-z]{8,}[0-9a-z]{6}", generate_id("folder"))

    def test_unique(self):
        assert len({generate_id("content") for _ in range(200)}) == 200

    def test_timestamp_ms(self):
        assert get_timestamp_ms() > 1_700_000_000_000


class TestPhrases:
    def test_known_key(self):
        assert t("last_month") == "Last month"

    def test_unknown_key_returns_key(self):
        assert t("no_such_phrase") == "no_such_phrase"

    def test_unknown_language_falls_back_to_english(self):
        assert t("today", language="xx") == "Today"


class TestLogging:
    @pytest.fixture
    def portal_logger(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Settings, "get_logs_root", lambda self: tmp_path)
        portal_logger = logging.getLogger("portal")
        before = list(portal_logger.handlers)
        yield portal_logger
        for handler in portal_logger.handlers:
            if handler not in before:
                portal_logger.removeHandler(handler)
                handler.close()

    def test_file_handler_added_once(self, portal_logger, tmp_path):
        settings = make_settings()

        setup_logging(settings)
        setup_logging(settings)

        file_handlers = [
            h
            for h in portal_logger.handlers
            if isinstance(h, RotatingFileHandler) and h.baseFilename == str(tmp_path / "portal.log")
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == settings.log_max_bytes

    def test_module_logger_namespace(self):
        assert get_logger("services.folder_service").name == "portal.services.folder_service"
        assert get_logger("portal.context").name == "portal.context"
