# tests/unit/core/test_unit_diagnostics.py — v1
"""Tests for core/diagnostics.py — rotolog's own logging."""

from __future__ import annotations

import io
import logging

from rotolog.core.diagnostics import DiagnosticFormatter, setup_diagnostics
from rotolog.core.models import SinkConfig
from rotolog.handlers.file_sink import BufferedFileSink


class TestDiagnosticFormatter:
    def test_format_basic(self):
        record = logging.LogRecord(
            name="rotolog.x", level=logging.INFO, pathname="", lineno=0,
            msg="Rotating %s", args=("app.log",), exc_info=None,
        )
        output = DiagnosticFormatter().format(record)
        assert "[INFO    ] rotolog.x - Rotating app.log" in output


class TestSetupDiagnostics:
    def test_routes_to_stream(self):
        buf = io.StringIO()
        setup_diagnostics("DEBUG", stream=buf)
        logging.getLogger("rotolog.test").debug("visible")
        assert "visible" in buf.getvalue()
        assert logging.getLogger("rotolog").level == logging.DEBUG

    def test_module_loggers_reach_stream(self, log_dir):
        buf = io.StringIO()
        setup_diagnostics("DEBUG", stream=buf)
        sink = BufferedFileSink(SinkConfig(directory=log_dir, file_name="diag"))
        sink.open()
        sink.close()
        assert "rotolog.handlers.file_sink - Opened log file" in buf.getvalue()

    def test_reinit_does_not_stack(self):
        setup_diagnostics("INFO", stream=io.StringIO())
        setup_diagnostics("INFO", stream=io.StringIO())
        root = logging.getLogger("rotolog")
        ours = [h for h in root.handlers if isinstance(h.formatter, DiagnosticFormatter)]
        assert len(ours) == 1
