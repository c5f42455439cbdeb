"""Tests for format parsing and formatters"""

import io
import json
from datetime import datetime

import pytest

from logfacade import LogConfiguration, LogEntry, LogLevel, StyledText
from logfacade.core.format_token import FormatToken
from logfacade.formatters import (
    FormatterError,
    JSONFormatter,
    StrftimeDateFormatter,
    TextNode,
    TokenizedFormatter,
    TokenNode,
    iso8601_date_formatter,
    parse_format,
)

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, 678000)


def make_entry(message="boom", level=LogLevel.ERROR, **kwargs):
    kwargs.setdefault("timestamp", FIXED_TIME)
    return LogEntry(message, level, **kwargs)


class TestParseFormat:
    """Test format string parsing."""

    def test_empty_format(self):
        assert parse_format("") == ()

    def test_no_tokens(self):
        assert parse_format("plain text") == (TextNode(StyledText("plain text")),)

    def test_tokens_and_text(self):
        nodes = parse_format("[(%level)] (%message)")
        assert nodes == (
            TextNode(StyledText("[")),
            TokenNode(FormatToken.LEVEL),
            TextNode(StyledText("] ")),
            TokenNode(FormatToken.MESSAGE),
        )

    def test_adjacent_tokens(self):
        assert parse_format("(%level)(%message)") == (
            TokenNode(FormatToken.LEVEL),
            TokenNode(FormatToken.MESSAGE),
        )

    def test_unknown_token_is_text(self):
        nodes = parse_format("a (%thread) b")
        assert nodes == (
            TextNode(StyledText("a ")),
            TextNode(StyledText("(%thread)")),
            TextNode(StyledText(" b")),
        )

    def test_every_token_name(self):
        for token in FormatToken:
            assert parse_format(f"(%{token.value})") == (TokenNode(token),)

    def test_custom_delimiter(self):
        nodes = parse_format("%level%: %message%", r"%(\w+)%")
        assert nodes == (
            TokenNode(FormatToken.LEVEL),
            TextNode(StyledText(": ")),
            TokenNode(FormatToken.MESSAGE),
        )

    def test_invalid_pattern(self):
        with pytest.raises(FormatterError):
            parse_format("(%level)", r"(%(\w+")

    def test_pattern_without_group(self):
        with pytest.raises(FormatterError):
            parse_format("(%level)", r"\(%\w+\)")

    def test_styled_format_keeps_styles(self):
        fmt = StyledText("> ", {"bold": True}).append("(%message) <")
        nodes = parse_format(fmt)
        assert nodes == (
            TextNode(StyledText("> ", {"bold": True})),
            TokenNode(FormatToken.MESSAGE),
            TextNode(StyledText(" <")),
        )


class TestTokenizedFormatter:
    """Test plain text rendering."""

    def test_level_and_message(self):
        formatter = TokenizedFormatter(LogConfiguration(), "[(%level)] (%message)")
        assert formatter.format(make_entry()) == "[ERROR] boom"

    def test_format_without_tokens_is_unchanged(self):
        formatter = TokenizedFormatter(LogConfiguration(), "nothing to replace")
        for entry in (make_entry(), make_entry("other", LogLevel.TRACE, category="x")):
            assert formatter.format(entry) == "nothing to replace"

    def test_empty_format(self):
        formatter = TokenizedFormatter(LogConfiguration(), "")
        assert formatter.format(make_entry()) == ""

    def test_unknown_token_verbatim(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%thread) (%message)")
        assert formatter.format(make_entry()) == "(%thread) boom"

    def test_missing_call_site_renders_empty(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%function)[(%file):(%line)] (%message)")
        assert formatter.format(make_entry()) == "[:] boom"

    def test_call_site_tokens(self):
        formatter = TokenizedFormatter(
            LogConfiguration(), "(%function) (%file) (%filename) (%line)"
        )
        entry = make_entry(function_name="handler", file_name="/src/app/main.py", line_number=42)
        assert formatter.format(entry) == "handler /src/app/main.py main.py 42"

    def test_filename_ignores_trailing_separator(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%filename)")
        assert formatter.format(make_entry(file_name="/src/app/")) == "app"
        assert formatter.format(make_entry(file_name="main.py")) == "main.py"

    def test_category_and_type(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%type) (%category)")
        assert formatter.format(make_entry(category="db")) == "entry db"
        assert formatter.format(LogEntry.start_marker()) == "start general"

    def test_default_date(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%date)")
        assert formatter.format(make_entry()) == "2024-01-02T03:04:05"

    def test_custom_date_formatter(self):
        formatter = TokenizedFormatter(
            LogConfiguration(), "(%date)", date_formatter=StrftimeDateFormatter("%H:%M:%S.%f")
        )
        assert formatter.format(make_entry()) == "03:04:05.678"

    def test_custom_level_description(self):
        config = LogConfiguration(level_descriptions={LogLevel.ERROR: "E!"})
        formatter = TokenizedFormatter(config, "(%level)")
        assert formatter.format(make_entry()) == "E!"
        assert formatter.format(make_entry(level=LogLevel.WARN)) == "WARN"

    def test_newlines_rendered_as_spaces(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%message)")
        assert formatter.format(make_entry("a\nb")) == "a b"

    def test_deterministic(self):
        formatter = TokenizedFormatter(LogConfiguration())
        entry = make_entry(function_name="f", file_name="/x/y.py", line_number=3)
        assert formatter.format(entry) == formatter.format(entry)

    def test_default_format(self):
        formatter = TokenizedFormatter(LogConfiguration())
        entry = make_entry(
            "disk low", LogLevel.WARN,
            function_name="check", file_name="/x/y.py", line_number=10,
        )
        assert formatter.format(entry) == "2024-01-02T03:04:05 WARN general, check[/x/y.py:10] disk low"

    def test_format_from_configuration(self):
        config = LogConfiguration(format_string="(%level): (%message)")
        assert TokenizedFormatter(config).format(make_entry()) == "ERROR: boom"

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(FormatterError):
            TokenizedFormatter(LogConfiguration(), "(%level)", token_pattern="[")

    def test_callable(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%message)")
        assert formatter(make_entry()) == "boom"


class TestStyledRendering:
    """Test styled (attributed) rendering."""

    def test_plain_when_no_styles(self):
        formatter = TokenizedFormatter(LogConfiguration(), "[(%level)] (%message)")
        assert formatter.format_with_attributes(make_entry()) == StyledText("[ERROR] boom")

    def test_token_style_from_configuration(self):
        config = LogConfiguration(token_styles={FormatToken.LEVEL: {"color": "red"}})
        formatter = TokenizedFormatter(config, "[(%level)] (%message)")

        styled = formatter.format_with_attributes(make_entry())

        expected = StyledText("[").append("ERROR", {"color": "red"}).append("] boom")
        assert styled == expected

    def test_token_style_does_not_leak_backward(self):
        config = LogConfiguration(token_styles={FormatToken.MESSAGE: {"color": "blue"}})
        formatter = TokenizedFormatter(config, "a (%level) (%message)")

        styled = formatter.format_with_attributes(make_entry())

        assert styled.style_at(0) == {}
        assert styled.style_at(2) == {}
        assert styled.style_at(-1) == {"color": "blue"}

    def test_value_inherits_preceding_literal_style(self):
        fmt = StyledText("> ", {"bold": True}).append("(%message)")
        formatter = TokenizedFormatter(LogConfiguration(), fmt)
        assert formatter.format_with_attributes(make_entry("hi")) == StyledText("> hi", {"bold": True})

    def test_styled_level_description(self):
        config = LogConfiguration(level_descriptions={LogLevel.ERROR: StyledText("ERR", {"color": "red"})})
        formatter = TokenizedFormatter(config, "(%level)")
        assert formatter.format_with_attributes(make_entry()) == StyledText("ERR", {"color": "red"})
        assert formatter.format(make_entry()) == "ERR"

    def test_formatter_token_styles_override_configuration(self):
        config = LogConfiguration(token_styles={FormatToken.LEVEL: {"color": "red"}})
        formatter = TokenizedFormatter(config, "(%level)", token_styles={FormatToken.LEVEL: {"color": "green"}})
        assert formatter.format_with_attributes(make_entry()) == StyledText("ERROR", {"color": "green"})

    def test_empty_output_is_none(self):
        formatter = TokenizedFormatter(LogConfiguration(), "(%function)")
        assert formatter.format_with_attributes(make_entry()) is None


class TestStyledText:
    """Test the styled text container."""

    def test_append_and_plain(self):
        text = StyledText("ab").append("cd", {"bold": True})
        assert text.plain == "abcd"
        assert str(text) == "abcd"
        assert len(text) == 4

    def test_adjacent_equal_styles_merge(self):
        text = StyledText("a", {"x": 1}).append("b", {"x": 1})
        assert len(text.segments) == 1

    def test_slice(self):
        text = StyledText("ab").append("cd", {"bold": True})
        assert text.slice(1, 3) == StyledText("b").append("c", {"bold": True})

    def test_style_at_out_of_range(self):
        with pytest.raises(IndexError):
            StyledText("a").style_at(5)

    def test_last_style(self):
        assert StyledText().last_style == {}
        assert StyledText("a", {"bold": True}).last_style == {"bold": True}


class TestDateFormatters:
    """Test date formatting strategies."""

    def test_iso8601(self):
        assert iso8601_date_formatter(FIXED_TIME) == "2024-01-02T03:04:05"

    def test_strftime_default(self):
        assert StrftimeDateFormatter()(FIXED_TIME) == "2024-01-02 03:04:05.678"


class TestJSONFormatter:
    """Test JSON rendering."""

    def test_fields(self):
        formatter = JSONFormatter(LogConfiguration())
        entry = make_entry(category="db", function_name="save", file_name="/a/b.py", line_number=9)

        data = json.loads(formatter.format(entry))

        assert data["type"] == "entry"
        assert data["timestamp"] == "2024-01-02T03:04:05.678000"
        assert data["level"] == "ERROR"
        assert data["category"] == "db"
        assert data["message"] == "boom"
        assert data["source"] == {"file": "/a/b.py", "line": 9, "function": "save"}

    def test_minimal(self):
        formatter = JSONFormatter(include_thread_info=False, include_source_info=False)
        data = json.loads(formatter.format(make_entry(extra={"request": 1})))
        assert "thread_name" not in data
        assert "source" not in data
        assert data["extra"] == {"request": 1}

    def test_serialization_failure_is_soft(self):
        errors = io.StringIO()
        formatter = JSONFormatter(error_stream=errors)

        result = formatter.format(make_entry(extra={"obj": object()}))

        assert result is None
        assert "JSON formatter error" in errors.getvalue()
