"""Tests for structured logging helpers and formatters."""

import json
import logging

import pytest

from catalog.constants import MAX_LOG_SIZE_BYTES
from catalog.logging import (
    HumanReadableFormatter,
    StructuredJSONFormatter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from catalog.middlewares.correlation_id import correlation_id


def _record(msg="Genre created", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="catalog",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


class TestLogContext:
    """Test log context management."""

    def test_set_and_get_log_context(self):
        set_log_context(endpoint="/catalog/genres", method="GET")

        assert get_log_context() == {
            "endpoint": "/catalog/genres",
            "method": "GET",
        }

    def test_set_merges_fields(self):
        set_log_context(endpoint="/catalog/genres")
        set_log_context(status_code=200)

        assert get_log_context() == {
            "endpoint": "/catalog/genres",
            "status_code": 200,
        }

    def test_clear_log_context(self):
        set_log_context(endpoint="/catalog/genres")
        clear_log_context()

        assert get_log_context() == {}


class TestStructuredJSONFormatter:
    def test_standard_fields(self):
        output = json.loads(StructuredJSONFormatter().format(_record()))

        assert output["message"] == "Genre created"
        assert output["level"] == "INFO"
        assert output["logger"] == "catalog"
        assert "environment" in output
        assert "request_id" not in output

    def test_includes_context_and_correlation_id(self):
        set_log_context(endpoint="/catalog/genres")
        token = correlation_id.set("abcd1234")
        try:
            output = json.loads(StructuredJSONFormatter().format(_record()))
        finally:
            correlation_id.reset(token)

        assert output["endpoint"] == "/catalog/genres"
        assert output["request_id"] == "abcd1234"

    def test_includes_extra_fields(self):
        record = _record(exception_type="NotFoundError")

        output = json.loads(StructuredJSONFormatter().format(record))

        assert output["exception_type"] == "NotFoundError"

    def test_truncates_oversized_messages(self):
        record = _record(msg="x" * (MAX_LOG_SIZE_BYTES + 100))

        output = json.loads(StructuredJSONFormatter().format(record))

        assert output["message"].endswith("... [TRUNCATED]")
        assert len(output["message"]) < MAX_LOG_SIZE_BYTES


class TestHumanReadableFormatter:
    def test_info_line_has_placeholder_id(self):
        line = HumanReadableFormatter().format(_record())

        assert "[-] INFO: Genre created" in line

    def test_error_line_has_location(self):
        record = _record(msg="boom", level=logging.ERROR)

        line = HumanReadableFormatter().format(record)

        assert "ERROR:" in line
        assert ":10 - boom" in line
