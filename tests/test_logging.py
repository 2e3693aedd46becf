"""Tests for log events."""

from datetime import datetime, timezone

import pytest
import structlog
from structlog.testing import capture_logs

from datekit import (
    DateArithmeticError,
    GregorianCalendar,
    Offset,
    add,
    configure_calendar,
    configure_logging,
    get_logger,
    make_date,
)


@pytest.fixture
def restore_structlog():
    """Undo configure_logging so later tests see default structlog settings."""
    yield
    structlog.reset_defaults()


class TestLogEvents:
    """Test events emitted by the library."""

    def test_arithmetic_failure_logged_before_raise(self):
        with capture_logs() as logs:
            with pytest.raises(DateArithmeticError):
                add(datetime(9999, 12, 31, tzinfo=timezone.utc), Offset(days=1))

        assert logs[-1]["event"] == "date_arithmetic_failed"
        assert logs[-1]["log_level"] == "error"
        assert logs[-1]["operation"] == "add"
        assert logs[-1]["logger"] == "datekit.arithmetic"

    def test_rejected_date(self):
        with capture_logs() as logs:
            assert make_date(2025, 2, 30) is None

        assert logs[-1]["event"] == "date_rejected"
        assert logs[-1]["reason"] == "unrepresentable"

    def test_rolled_over_date(self):
        new_york = GregorianCalendar("America/New_York")

        with capture_logs() as logs:
            assert make_date(2025, 3, 9, 2, 30, calendar=new_york) is None

        assert logs[-1]["reason"] == "rolled_over"

    def test_default_logger_name(self):
        with capture_logs() as logs:
            get_logger().info("library_event")

        assert logs[-1]["logger"] == "datekit"

    def test_configuration_logged(self):
        with capture_logs() as logs:
            configure_calendar(timezone="Asia/Tokyo")

        assert logs[-1]["event"] == "calendar_configured"
        assert logs[-1]["timezone"] == "Asia/Tokyo"


class TestConfigureLogging:
    """Test logging setup."""

    def test_level_filters_debug(self, restore_structlog, capsys):
        configure_logging(level="WARNING")

        get_logger("datekit.tests.level").debug("sample_debug")
        get_logger("datekit.tests.level").warning("sample_warning")

        out = capsys.readouterr().out
        assert "sample_debug" not in out
        assert "sample_warning" in out

    def test_json_output(self, restore_structlog, capsys):
        configure_logging(level="DEBUG", json_output=True)

        get_logger("datekit.tests.json").debug("sample_debug", year=2025)

        out = capsys.readouterr().out
        assert '"event": "sample_debug"' in out
        assert '"year": 2025' in out

    def test_datekit_only_drops_other_loggers(self, restore_structlog, capsys):
        configure_logging(level="INFO", datekit_only=True)

        get_logger("datekit.tests.filter").info("kept_event")
        get_logger("datekitty.tests").info("other_event")
        get_logger("application").info("foreign_event")

        out = capsys.readouterr().out
        assert "kept_event" in out
        assert "other_event" not in out
        assert "foreign_event" not in out
