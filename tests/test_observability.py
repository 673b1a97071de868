"""Tests for structured export logging."""

import logging

from pagecraft.observability import get_logger, log_export_event


class TestLogExportEvent:
    def test_event_fields_are_attached(self, caplog):
        with caplog.at_level(logging.INFO, logger="pagecraft.export"):
            log_export_event("archive_written", target="static", path="dist/site.zip", files=None)
        record = caplog.records[-1]
        assert record.getMessage() == "Archive written"
        assert record.pagecraft_event == "archive_written"
        assert record.pagecraft_data == {"target": "static", "path": "dist/site.zip"}

    def test_custom_level_and_message(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pagecraft.export"):
            log_export_event("page_rendered", message="Rendered Home", level=logging.DEBUG, page="Home")
        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "Rendered Home"

    def test_get_logger_is_cached(self):
        assert get_logger("pagecraft.test") is get_logger("pagecraft.test")
