"""
Tests for startgen.script.encoding module.

Tests argument encoding including:
- POSIX single-quote wrapping
- POSIX double-quote escaping
- Windows batch % and " escaping (backslash state machine)
- Representable character checks
"""

from __future__ import annotations

import shlex

import pytest

from startgen.exceptions import EncodingError
from startgen.script.encoding import (
    check_representable,
    encode_posix,
    encode_windows,
    escape_posix_double_quoted,
)

# All tests in this file are unit tests (fast, no I/O)
pytestmark = pytest.mark.unit


def _decode_batch_argument(quoted: str) -> str:
    """Parse one double-quoted argument the way a batch file hands it to java.

    The batch parser turns %% into %, then the C runtime argument splitter
    handles backslashes: 2n backslashes before a quote give n backslashes
    and a delimiter, 2n+1 give n backslashes and a literal quote, and
    backslashes not followed by a quote are literal.
    """
    text = quoted.replace("%%", "%")
    assert text.startswith('"') and text.endswith('"')

    result: list[str] = []
    in_quotes = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            run = 0
            while i < len(text) and text[i] == "\\":
                run += 1
                i += 1
            if i < len(text) and text[i] == '"':
                result.append("\\" * (run // 2))
                if run % 2:
                    result.append('"')
                    i += 1
            else:
                result.append("\\" * run)
            continue
        if ch == '"':
            in_quotes = not in_quotes
        else:
            result.append(ch)
        i += 1

    assert not in_quotes, f"unterminated quote in {quoted!r}"
    return "".join(result)


class TestEncodeWindows:
    """Tests for the Windows batch encoder."""

    @pytest.mark.parametrize(
        "value",
        ["", "-Xmx512m", "-Dname=some value", "it's", "C:\\Program Files\\app", "a\\b"],
    )
    def test_plain_values_unchanged(self, value):
        """Test strings without %, " or a backslash-quote pair pass through."""
        assert encode_windows(value) == value

    def test_percent_doubled(self):
        """Test % becomes %%."""
        assert encode_windows("-Dfoo=%PATH%") == "-Dfoo=%%PATH%%"

    def test_only_percent_changes(self):
        """Test doubling % alters no other character."""
        value = "a%b c%%d'e"
        assert encode_windows(value) == "a%%b c%%%%d'e"
        assert encode_windows(value).replace("%%", "%") == value

    def test_quote_escaped(self):
        """Test a quote not preceded by a backslash becomes \\"."""
        assert encode_windows('say "hi"') == 'say \\"hi\\"'

    def test_backslash_quote_pathological_case(self):
        """Test a quote preceded by a backslash becomes \\\\\\"."""
        assert encode_windows('a\\"b') == 'a\\\\\\"b'

    def test_backslash_state_resets(self):
        """Test the backslash state only covers the immediately preceding character."""
        assert encode_windows('\\x"') == '\\x\\"'

    def test_trailing_backslash_left_alone(self):
        """Test a backslash at the end of the value is not escaped."""
        assert encode_windows("C:\\dir\\") == "C:\\dir\\"

    @pytest.mark.parametrize(
        "value",
        [
            "-Xmx512m",
            "-Dfoo=%PATH%",
            '-Dmsg="hello world"',
            '-Dpath=C:\\"quoted"',
            "-Dpct=100%",
            "-Dsq='single'",
            "-Dmixed=%\"a\"\\b%",
        ],
    )
    def test_batch_round_trip(self, value):
        """Test batch parsing of the quoted encoding reproduces the value."""
        assert _decode_batch_argument(f'"{encode_windows(value)}"') == value


class TestEncodePosix:
    """Tests for the POSIX single-quote encoder."""

    def test_simple_value(self):
        """Test a plain value is single-quoted."""
        assert encode_posix("-Xmx512m") == "'-Xmx512m'"

    def test_embedded_single_quote(self):
        """Test an embedded quote is closed, escaped and reopened."""
        assert encode_posix("it's") == "'it'\\''s'"

    @pytest.mark.parametrize(
        "value",
        ["", "a b", 'say "hi"', "$HOME", "`date`", "it's", "x\ny", "100%", "a\\b"],
    )
    def test_shell_round_trip(self, value):
        """Test POSIX shell parsing yields the original single token."""
        assert shlex.split(encode_posix(value)) == [value]


class TestEscapePosixDoubleQuoted:
    """Tests for escaping inside POSIX double quotes."""

    def test_specials_escaped(self):
        """Test backslash, quote, dollar and backtick are escaped."""
        assert escape_posix_double_quoted('\\"$`') == '\\\\\\"\\$\\`'

    def test_other_characters_literal(self):
        """Test spaces, single quotes and percent signs are untouched."""
        assert escape_posix_double_quoted("a b 'c' 100%") == "a b 'c' 100%"

    def test_round_trip_without_expansions(self):
        """Test double-quote parsing reproduces values without $ or backticks."""
        value = 'say "hi" to C:\\dir'
        assert shlex.split(f'"{escape_posix_double_quoted(value)}"') == [value]


class TestCheckRepresentable:
    """Tests for platform character checks."""

    def test_ordinary_value_returned(self):
        """Test a normal value is returned unchanged."""
        assert check_representable("-Dname=café", "windows", "defaultJvmOpts") == (
            "-Dname=café"
        )

    @pytest.mark.parametrize("platform", ["posix", "windows"])
    def test_nul_rejected(self, platform):
        """Test NUL is rejected on every platform."""
        with pytest.raises(EncodingError, match="defaultJvmOpts"):
            check_representable("a\x00b", platform, "defaultJvmOpts")

    @pytest.mark.parametrize("value", ["a\nb", "a\rb"])
    def test_line_breaks_rejected_on_windows(self, value):
        """Test line breaks cannot appear in a batch line."""
        with pytest.raises(EncodingError):
            check_representable(value, "windows", "applicationName")

    def test_newline_allowed_on_posix(self):
        """Test newlines are fine inside POSIX single quotes."""
        assert check_representable("a\nb", "posix", "defaultJvmOpts") == "a\nb"

    def test_lone_surrogate_rejected(self):
        """Test values that cannot be written as UTF-8 are rejected."""
        with pytest.raises(EncodingError, match="UTF-8"):
            check_representable("bad\udc80", "posix", "mainClassName")
