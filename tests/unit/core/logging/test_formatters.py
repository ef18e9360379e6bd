"""
Tests for log formatters.
"""

import json
import logging
import sys

import pytest

from http_dump.core.logging.formatters import (
    ColoredFormatter,
    JSONFormatter,
    TextFormatter,
    extra_fields,
    get_formatter,
)


def make_record(msg="Request completed", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="http_dump.client",
        level=level,
        pathname="client.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestExtraFields:

    def test_only_custom_attributes(self):
        record = make_record(method="GET", status_code=200)
        assert extra_fields(record) == {"method": "GET", "status_code": 200}

    def test_private_attributes_skipped(self):
        record = make_record(_internal=1)
        assert extra_fields(record) == {}


class TestJSONFormatter:

    def test_basic_format(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "http_dump.client"
        assert data["message"] == "Request completed"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_included(self):
        data = json.loads(JSONFormatter().format(make_record(method="POST", status_code=405)))

        assert data["method"] == "POST"
        assert data["status_code"] == 405

    def test_non_serializable_extra(self):
        data = json.loads(JSONFormatter().format(make_record(error=ValueError("boom"))))
        assert data["error"] == "boom"

    def test_exception_info(self):
        try:
            raise RuntimeError("failure")
        except RuntimeError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: failure" in data["exception"]


class TestTextFormatter:

    def test_format_with_extras(self):
        output = TextFormatter().format(make_record(method="GET", url="http://swapi.co/api/people/"))

        assert "[INFO] [http_dump.client] Request completed" in output
        assert output.endswith("method=GET url=http://swapi.co/api/people/")

    def test_format_without_extras(self):
        assert TextFormatter().format(make_record()).endswith("Request completed")


class TestColoredFormatter:

    def test_level_is_colored(self):
        output = ColoredFormatter().format(make_record(level=logging.ERROR))
        assert "\033[31mERROR\033[0m" in output

    def test_record_levelname_restored(self):
        record = make_record(level=logging.WARNING)
        ColoredFormatter().format(record)
        assert record.levelname == "WARNING"


class TestGetFormatter:

    @pytest.mark.parametrize("name,cls", [
        ("json", JSONFormatter),
        ("TEXT", TextFormatter),
        ("colored", ColoredFormatter),
    ])
    def test_known(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("xml")
