from __future__ import annotations

import logging

import pytest

from podwire.adapters.reporting import LoggingReporter


def test_reporter_logs_section_messages_and_warnings(caplog: pytest.LogCaptureFixture) -> None:
    reporter = LoggingReporter(logging.getLogger("podwire.test"))

    with caplog.at_level(logging.INFO, logger="podwire.test"):
        with reporter.section("Integrating target `MathKit`"):
            reporter.message("Remove old Pod product reference libMathKit.a from project.")
        reporter.warning("base configuration kept")

    records = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert records == [
        (logging.INFO, "Integrating target `MathKit`"),
        (logging.INFO, "  Remove old Pod product reference libMathKit.a from project."),
        (logging.WARNING, "base configuration kept"),
    ]
