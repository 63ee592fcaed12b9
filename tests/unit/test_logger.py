"""
Logger factory tests.
"""

import logging

import pytest  # type: ignore

from freshdesk_api.config.settings import FreshdeskSettings
from freshdesk_api.sources.client.freshdesk.freshdesk import FreshDeskClient
from freshdesk_api.utils.logger import (
    LOG_FORMAT,
    create_logger,
    log_level_from_env,
    set_log_level,
)


class TestCreateLogger:
    """Named loggers with the package console handler."""

    def test_handler_is_added_once(self):
        first = create_logger("freshdesk_test_once")
        second = create_logger("freshdesk_test_once")

        assert first is second
        assert len(first.handlers) == 1
        assert first.handlers[0].formatter._fmt == LOG_FORMAT

    def test_level_comes_from_environment(self, monkeypatch):
        monkeypatch.setenv("FRESHDESK_LOG_LEVEL", "warning")

        logger = create_logger("freshdesk_test_level")

        assert logger.level == logging.WARNING

    @pytest.mark.parametrize("value", ["verbose", "", "  "])
    def test_unknown_level_falls_back_to_info(self, monkeypatch, value):
        monkeypatch.setenv("FRESHDESK_LOG_LEVEL", value)

        assert log_level_from_env() == logging.INFO

    def test_set_log_level_updates_package_loggers(self):
        logger = create_logger("freshdesk_test_set_level")

        set_log_level("ERROR")
        assert logger.level == logging.ERROR

        set_log_level("info")
        assert logger.level == logging.INFO

    def test_build_from_settings_applies_log_level(self, transport):
        logger = create_logger("freshdesk_test_settings_level")
        settings = FreshdeskSettings(domain="acme.freshdesk.com", api_key="key", log_level="DEBUG")

        FreshDeskClient.build_from_settings(settings, transport=transport.mock)

        assert logger.level == logging.DEBUG
        set_log_level("INFO")
