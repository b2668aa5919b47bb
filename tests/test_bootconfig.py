"""Tests for the bootconfig line parser."""

import pytest

from shell_fields.domain.entities import ConfigEntry
from shell_fields.domain.exceptions import (
    ConfigParseError,
    InvalidEncodingError,
    MissingSeparatorError,
    ScanError,
    UnterminatedQuoteError,
    ValueParseError,
)
from shell_fields.parsing.bootconfig import LineScanner, parse_config, parse_entries, parse_line


class TestParseConfig:
    def test_sample_listing(self, bootconfig_text):
        assert parse_config(bootconfig_text) == [
            "kernel.CabCmdBranches=test\\x20me,here,ok",
            "kernel.CabCmdDryRun=1",
            "kernel.CabIP=10.10.1.234",
        ]

    def test_single_line_without_newline(self):
        assert parse_config('CabCmdBranches = "test\\x20me", "here", "ok"') == [
            "CabCmdBranches=test\\x20me,here,ok"
        ]

    def test_crlf_line_endings(self):
        assert parse_config("a = 1\r\nb = 2\r\n") == ["a=1", "b=2"]

    def test_empty_input(self):
        assert parse_config("") == []

    def test_splits_on_first_equals_only(self):
        assert parse_config('k = "a=b", c=d') == ["k=a=b,c=d"]

    def test_empty_value(self):
        assert parse_config("  key =  ") == ["key="]

    def test_quoted_value_with_separators(self):
        assert parse_config('k = "x, y" z') == ["k=x, y,z"]

    def test_missing_separator(self):
        with pytest.raises(MissingSeparatorError) as exc_info:
            parse_config("a = 1\nno separator here\nb = 2\n")
        assert exc_info.value.line == "no separator here"
        assert "'no separator here'" in str(exc_info.value)

    def test_blank_line_is_missing_separator(self):
        with pytest.raises(MissingSeparatorError) as exc_info:
            parse_config("a = 1\n\nb = 2\n")
        assert exc_info.value.line == ""

    def test_value_parse_error_wraps_tokenizer_error(self):
        line = 'k = "unterminated'
        with pytest.raises(ValueParseError) as exc_info:
            parse_config(line)
        assert exc_info.value.line == line
        assert isinstance(exc_info.value.__cause__, UnterminatedQuoteError)

    def test_value_parse_error_for_invalid_encoding(self):
        with pytest.raises(ValueParseError) as exc_info:
            parse_config("k = a\ud800")
        assert isinstance(exc_info.value.__cause__, InvalidEncodingError)

    def test_line_too_long(self):
        with pytest.raises(ScanError):
            parse_config("k = " + "x" * 20, max_line_length=10)

    def test_errors_share_base_class(self):
        with pytest.raises(ConfigParseError):
            parse_config("nothing")


class TestParseEntries:
    def test_entries_keep_fields(self, bootconfig_text):
        entries = parse_entries(bootconfig_text)
        assert entries[0] == ConfigEntry(
            key="kernel.CabCmdBranches",
            value="test\\x20me,here,ok",
            fields=("test\\x20me", "here", "ok"),
        )
        assert str(entries[2]) == "kernel.CabIP=10.10.1.234"

    def test_parse_line(self):
        entry = parse_line("  spaced.key\t=\t'one' 'two'")
        assert entry.key == "spaced.key"
        assert entry.value == "one,two"


class TestLineScanner:
    def test_trailing_newline_adds_no_line(self):
        assert list(LineScanner("a\nb\n")) == ["a", "b"]

    def test_last_line_without_newline(self):
        assert list(LineScanner("a\nb")) == ["a", "b"]

    def test_blank_lines_are_kept(self):
        assert list(LineScanner("a\n\nb")) == ["a", "", "b"]

    def test_single_newline(self):
        assert list(LineScanner("\n")) == [""]

    def test_empty_text(self):
        assert list(LineScanner("")) == []

    def test_drops_one_carriage_return(self):
        assert list(LineScanner("a\r\r\nb\r")) == ["a\r", "b"]

    def test_limit_counts_bytes(self):
        assert list(LineScanner("жж", max_line_length=4)) == ["жж"]
        with pytest.raises(ScanError):
            list(LineScanner("жжж", max_line_length=4))

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            LineScanner("a", max_line_length=0)
