"""Tests for formatters"""

import json
from datetime import datetime

import pytest

from hierlog import Level
from hierlog.core.log_record import clone_log_record, create_log_record
from hierlog.formatters import (
    BaseFormatter,
    BasicFormatter,
    ColorizedFormatter,
    CombinedFormatter,
    ConditionalFormatter,
    DetailedFormatter,
    JSONFormatter,
    MessageOnlyFormatter,
    SimpleFormatter,
    TemplateFormatter,
)
from hierlog.formatters.detailed_formatter import format_timestamp

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, 678000)


def make_record(level=Level.INFO, message="hello", args=(), extra=None):
    record = create_log_record("app", level, Level(level).name, message, args, extra=extra)
    return clone_log_record(record, timestamp=FIXED_TIME)


class TestBaseFormatter:
    """Test the formatter interface."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseFormatter()

    def test_callable(self):
        formatter = BasicFormatter()
        record = make_record()
        assert formatter(record) == formatter.format(record)


class TestBasicFormatters:
    """Test minimal formatters."""

    def test_basic(self):
        assert BasicFormatter().format(make_record()) == "INFO:app:hello"

    def test_simple(self):
        assert SimpleFormatter().format(make_record(Level.ERROR)) == "ERROR: hello"

    def test_message_only(self):
        assert MessageOnlyFormatter().format(make_record()) == "hello"


class TestDetailedFormatter:
    """Test detailed formatter."""

    def test_default(self):
        assert DetailedFormatter().format(make_record()) == (
            "2024-01-02T03:04:05.678 - INFO - app - hello"
        )

    @pytest.mark.parametrize("style,expected", [
        ("iso", "2024-01-02T03:04:05.678"),
        ("short", "2024-01-02 03:04:05"),
        ("time", "03:04:05"),
        ("unknown", "2024-01-02T03:04:05.678"),
    ])
    def test_timestamp_formats(self, style, expected):
        assert format_timestamp(FIXED_TIME, style) == expected

    def test_locale_timestamp(self):
        assert format_timestamp(FIXED_TIME, "locale") == FIXED_TIME.strftime("%c")

    def test_parts_and_separator(self):
        formatter = DetailedFormatter(
            include_timestamp=False, include_name=False, separator=" | "
        )
        assert formatter.format(make_record()) == "INFO | hello"

    def test_extra(self):
        formatter = DetailedFormatter(include_timestamp=False, include_extra=True)
        record = make_record(extra={"user": "bob", "attempt": 2})
        assert formatter.format(record) == 'INFO - app - hello - [user="bob" attempt=2]'

    def test_circular_extra(self):
        loop = {}
        loop["self"] = loop
        formatter = DetailedFormatter(include_timestamp=False, include_extra=True)

        output = formatter.format(make_record(extra={"loop": loop, "ok": 1}))

        assert output.startswith("INFO - app - hello - [loop=")
        assert output.endswith(" ok=1]")

    def test_extra_omitted_when_empty(self):
        formatter = DetailedFormatter(include_timestamp=False, include_extra=True)
        assert formatter.format(make_record()) == "INFO - app - hello"


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data == {
            "timestamp": FIXED_TIME.isoformat(),
            "level": "INFO",
            "logger": "app",
            "message": "hello",
        }

    def test_extra_merged(self):
        data = json.loads(JSONFormatter().format(make_record(extra={"request_id": "r1"})))
        assert data["request_id"] == "r1"

    def test_exception(self):
        record = make_record(Level.ERROR, args=(ValueError("boom"),))
        data = json.loads(JSONFormatter().format(record))
        assert data["exception"]["name"] == "ValueError"
        assert data["exception"]["message"] == "boom"
        assert "args" not in data

    def test_include_all(self):
        record = make_record(args=("a", 1))
        data = json.loads(JSONFormatter(include_all=True).format(record))
        assert data["level_num"] == 20
        assert data["args"] == ["a", 1]

    def test_field_mapping(self):
        formatter = JSONFormatter(field_mapping={"message": "msg", "timestamp": "@timestamp"})
        data = json.loads(formatter.format(make_record()))
        assert data["msg"] == "hello"
        assert "@timestamp" in data
        assert "message" not in data

    def test_pretty(self):
        output = JSONFormatter(pretty=True).format(make_record())
        assert output.startswith("{\n  ")

    def test_non_serializable_extra(self):
        class Opaque:
            def __str__(self):
                return "opaque"

        data = json.loads(JSONFormatter().format(make_record(extra={"obj": Opaque()})))
        assert data["obj"] == "opaque"

    def test_circular_extra(self):
        loop = {}
        loop["self"] = loop
        output = JSONFormatter().format(make_record(extra={"loop": loop, "ok": 1}))

        data = json.loads(output)
        assert data["ok"] == 1
        assert isinstance(data["loop"], str)


class TestColorizedFormatter:
    """Test colorized formatter."""

    def test_disabled(self):
        output = ColorizedFormatter(enabled=False).format(make_record())
        assert output == "2024-01-02T03:04:05.678 INFO app hello"

    def test_enabled(self):
        output = ColorizedFormatter(enabled=True).format(make_record())
        assert "\033[36mINFO\033[0m" in output
        assert "\033[2mapp\033[0m" in output
        assert output.endswith(" hello")

    def test_unknown_level_uncolored(self):
        record = clone_log_record(make_record(), level=25, level_name="Level 25")
        output = ColorizedFormatter(enabled=True, timestamp_color="", name_color="").format(record)
        assert output == "2024-01-02T03:04:05.678 Level 25 app hello"


class TestTemplateFormatters:
    """Test template and composite formatters."""

    def test_template(self):
        formatter = TemplateFormatter("{level} ({level_num}) {name} - {message}")
        assert formatter.format(make_record()) == "INFO (20) app - hello"

    def test_default_template(self):
        assert TemplateFormatter().format(make_record()) == (
            "2024-01-02T03:04:05.678 [INFO] app: hello"
        )

    def test_format_spec(self):
        assert TemplateFormatter("[{level:8}]").format(make_record()) == "[INFO    ]"

    def test_unknown_placeholder(self):
        output = TemplateFormatter("{host} {message}").format(make_record())
        assert output.startswith("[FORMAT ERROR:")
        assert output.endswith("hello")

    def test_combined(self):
        formatter = CombinedFormatter(SimpleFormatter(), MessageOnlyFormatter())
        assert formatter.format(make_record()) == "INFO: hello | hello"

    def test_combined_accepts_functions(self):
        formatter = CombinedFormatter(lambda r: r.name, MessageOnlyFormatter(), separator="/")
        assert formatter.format(make_record()) == "app/hello"

    def test_conditional(self):
        formatter = ConditionalFormatter(
            lambda r: r.level >= Level.ERROR, SimpleFormatter(), MessageOnlyFormatter()
        )
        assert formatter.format(make_record(Level.ERROR)) == "ERROR: hello"
        assert formatter.format(make_record(Level.INFO)) == "hello"
