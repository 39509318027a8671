"""
Tests for startgen.script.render and startgen.script.templates modules.

Tests template rendering including:
- Placeholder substitution and literal $$
- Platform line endings
- Strict handling of unknown placeholders
- Built-in templates and custom template loading
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from startgen.exceptions import EncodingError, GenerationError
from startgen.script.binding import PLACEHOLDERS, assemble_binding
from startgen.script.render import render_start_script, render_template
from startgen.script.templates import default_template, load_template

pytestmark = pytest.mark.unit


class TestRenderTemplate:
    """Tests for render_template()."""

    def test_substitutes_placeholders(self):
        """Test ${name} placeholders are replaced."""
        text = render_template("run ${mainClassName}\n", {"mainClassName": "a.B"}, "posix")

        assert text == "run a.B\n"

    def test_double_dollar_is_literal(self):
        """Test $$ renders as a single dollar sign."""
        text = render_template("echo $$HOME\n", {}, "posix")

        assert text == "echo $HOME\n"

    def test_percent_signs_untouched(self):
        """Test batch variable syntax passes through."""
        text = render_template("set X=%APP_HOME%\n", {}, "windows")

        assert text == "set X=%APP_HOME%\r\n"

    def test_unknown_placeholder_raises(self):
        """Test a placeholder missing from the binding raises GenerationError."""
        with pytest.raises(GenerationError, match="unknownThing"):
            render_template("x=${unknownThing}\n", {"classpath": ""}, "posix")

    def test_stray_dollar_raises(self):
        """Test an invalid $ sequence raises GenerationError."""
        with pytest.raises(GenerationError, match="Invalid template syntax"):
            render_template("cost: $ 5\n", {}, "posix")

    def test_windows_line_endings(self):
        """Test every Windows line ends in CRLF."""
        text = render_template("a\nb\r\nc\n", {}, "windows")

        assert text == "a\r\nb\r\nc\r\n"

    def test_posix_line_endings(self):
        """Test CRLF and bare CR become LF on POSIX."""
        text = render_template("a\r\nb\rc\n", {}, "posix")

        assert text == "a\nb\nc\n"

    def test_bound_values_keep_line_breaks(self):
        """Test only template line endings are converted, not bound values."""
        text = render_template("x=${v}\n", {"v": "a\rb\r\nc\nd"}, "posix")

        assert text == "x=a\rb\r\nc\nd\n"


class TestRenderStartScript:
    """Tests for render_start_script() with the built-in templates."""

    def test_windows_script_crlf_only(self, sample_descriptor):
        """Test the Windows script has no bare LF."""
        text = render_start_script(sample_descriptor, "windows")

        assert "\r\n" in text
        assert "\n" not in text.replace("\r\n", "")

    def test_posix_script_lf_only(self, sample_descriptor):
        """Test the POSIX script has no CR."""
        text = render_start_script(sample_descriptor, "posix")

        assert "\r" not in text
        assert text.startswith("#!/usr/bin/env sh\n")

    def test_windows_binding_values_rendered(self, sample_descriptor):
        """Test binding values land in the Windows script."""
        text = render_start_script(sample_descriptor, "windows")

        assert "set APP_HOME=%DIRNAME%..\r\n" in text
        assert 'set DEFAULT_JVM_OPTS="-Xmx512m" "-Dfoo=%%PATH%%"\r\n' in text
        assert "set CLASSPATH=%APP_HOME%\\lib\\my-app.jar;%APP_HOME%\\lib\\dep.jar" in text
        assert "%MY_APP_OPTS%" in text
        assert "%MY_APP_EXIT_CONSOLE%" in text
        assert '"-Dmy-app.appname=%APP_BASE_NAME%"' in text
        assert " com.example.Main %CMD_LINE_ARGS%" in text

    def test_posix_binding_values_rendered(self, sample_descriptor):
        """Test binding values land in the POSIX script."""
        text = render_start_script(sample_descriptor, "posix")

        assert "DEFAULT_JVM_OPTS='\"-Xmx512m\" \"-Dfoo=%PATH%\"'\n" in text
        assert "CLASSPATH=$APP_HOME/lib/my-app.jar:$APP_HOME/lib/dep.jar\n" in text
        assert '`dirname \\"$PRG\\"`/..' in text
        assert "$MY_APP_OPTS" in text
        assert "-Dmy-app.appname=$APP_BASE_NAME" in text
        assert " com.example.Main " in text

    @pytest.mark.parametrize("platform", ["posix", "windows"])
    def test_no_placeholder_left(self, sample_descriptor, platform):
        """Test no ${...} placeholder survives rendering."""
        text = render_start_script(sample_descriptor, platform)

        for name in PLACEHOLDERS:
            assert "${" + name + "}" not in text

    def test_custom_template(self, sample_descriptor):
        """Test a custom template body replaces the built-in one."""
        text = render_start_script(
            sample_descriptor, "windows", template="@rem ${applicationName}\n"
        )

        assert text == "@rem my-app\r\n"

    def test_deterministic(self, sample_descriptor):
        """Test repeated renders are identical."""
        assert render_start_script(sample_descriptor, "posix") == render_start_script(
            sample_descriptor, "posix"
        )

    def test_posix_carriage_return_in_option_kept(self, sample_descriptor):
        """Test a CR inside a POSIX option survives rendering byte for byte."""
        descriptor = replace(sample_descriptor, default_jvm_opts=("-Dcr=a\rb",))

        text = render_start_script(descriptor, "posix")

        assert "DEFAULT_JVM_OPTS='\"-Dcr=a\rb\"'\n" in text
        assert text.count("\r") == 1

    def test_encoding_error_propagates(self, sample_descriptor):
        """Test an unrepresentable value fails before rendering."""
        descriptor = replace(sample_descriptor, main_class_name="a\r\nB")

        with pytest.raises(EncodingError):
            render_start_script(descriptor, "windows")


class TestTemplates:
    """Tests for built-in and custom template access."""

    @pytest.mark.parametrize("platform", ["posix", "windows"])
    def test_default_templates_render_with_full_binding(self, sample_descriptor, platform):
        """Test built-in templates only use known placeholders."""
        binding = assemble_binding(sample_descriptor, platform)

        render_template(default_template(platform), binding, platform)

    def test_load_template(self, tmp_test_dir: Path):
        """Test a template file is read as text."""
        path = tmp_test_dir / "custom.sh.tmpl"
        path.write_text("#!/bin/sh\nexec java ${mainClassName}\n", encoding="utf-8")

        assert load_template(path) == "#!/bin/sh\nexec java ${mainClassName}\n"

    def test_load_missing_template(self, tmp_test_dir: Path):
        """Test a missing template raises GenerationError."""
        with pytest.raises(GenerationError, match="not found"):
            load_template(tmp_test_dir / "missing.tmpl")
