"""Tests for wastecal.core.logging_setup."""

import logging

import pytest

from wastecal.core.logging_setup import (
    SUPPRESSED_LOGGERS,
    configure_logging,
    get_logging_status,
    reset_logging_to_debug,
)

pytestmark = pytest.mark.unit


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configure_logging_default_production_mode(self):
        configure_logging()

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("wastecal").level == logging.INFO
        assert logging.getLogger("icalendar").level == logging.INFO

    def test_configure_logging_debug_mode(self):
        configure_logging(debug_mode=True)

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("wastecal.sheet.section_parser").level == logging.DEBUG

    def test_configure_logging_force_debug_overrides_env(self, monkeypatch):
        monkeypatch.setenv("WASTECAL_DEBUG", "1")
        configure_logging(force_debug=False)

        assert logging.getLogger("wastecal").level == logging.INFO

    def test_configure_logging_env_debug_override(self, monkeypatch):
        monkeypatch.setenv("WASTECAL_DEBUG", "yes")
        configure_logging(debug_mode=False)

        assert logging.getLogger("wastecal").level == logging.DEBUG

    def test_configure_logging_config_level_warning(self):
        configure_logging(level_name="warning")

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("wastecal").level == logging.WARNING

    def test_configure_logging_env_level_beats_config(self, monkeypatch):
        monkeypatch.setenv("WASTECAL_LOG_LEVEL", "ERROR")
        configure_logging(level_name="WARNING")

        assert logging.getLogger().level == logging.ERROR


class TestLoggingHelpers:
    """Tests for reset_logging_to_debug and get_logging_status."""

    def test_reset_logging_to_debug(self):
        configure_logging()
        reset_logging_to_debug()

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("icalendar").level == logging.DEBUG

    def test_get_logging_status_reports_levels(self):
        configure_logging()
        status = get_logging_status()

        assert status["root"] == "INFO"
        assert status["wastecal"] == "INFO"
        assert "wastecal.sheet.section_parser" in status

    def test_suppressed_loggers_when_listed_then_only_libraries_in_use(self):
        assert set(SUPPRESSED_LOGGERS) == {"icalendar"}
