"""Unit tests for the log formatters and logger naming."""

import json
import logging
import sys

from community_hub.core.logging import ColoredFormatter, JSONFormatter, get_logger


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="community_hub.services.plugin_service",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Created plugin '%s'",
        args=("Linter",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_message_and_extras_serialized(self) -> None:
        payload = json.loads(JSONFormatter().format(_record(plugin_id=7, tag_count=2)))

        assert payload["message"] == "Created plugin 'Linter'"
        assert payload["level"] == "INFO"
        assert payload["plugin_id"] == 7
        assert payload["tag_count"] == 2

    def test_exception_included(self) -> None:
        try:
            raise RuntimeError("disk I/O error")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JSONFormatter().format(record))

        assert payload["exception"]["type"] == "RuntimeError"
        assert payload["exception"]["message"] == "disk I/O error"


class TestColoredFormatter:
    def test_short_extras_appended(self) -> None:
        line = ColoredFormatter(use_colors=False).format(_record(plugin_id=7))

        assert "Created plugin 'Linter'" in line
        assert "plugin_id=7" in line
        assert "\033[" not in line


def test_get_logger_namespaces_under_app() -> None:
    assert get_logger("worker").name == "community_hub.worker"
    assert get_logger("community_hub.api").name == "community_hub.api"
