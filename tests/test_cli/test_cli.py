"""Tests for the rem-to-px CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rem_to_px import __version__
from rem_to_px.cli.main import cli


@pytest.fixture
def stylesheet(tmp_path):
    path = tmp_path / "site.css"
    path.write_text(
        "div { margin: 2rem; }\n@media (min-width: 20rem) { p { padding: 1rem; } }\n"
    )
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "rewrite rem lengths" in result.output
        assert "convert" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"rem-to-px, version {__version__}" in result.output

    def test_convert_help_shows_options(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", "--help"])
        assert result.exit_code == 0
        for option in (
            "--config",
            "--root-value",
            "--unit-precision",
            "--prop",
            "--selector-black-list",
            "--no-replace",
            "--media-query",
            "--min-unit-value",
            "--output",
        ):
            assert option in result.output


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_file_to_stdout(self, stylesheet) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet)])
        assert result.exit_code == 0
        assert "div { margin: 16px; }" in result.output
        assert "@media (min-width: 20rem) { p { padding: 8px; } }" in result.output
        assert "Converted 2 declaration(s) (2 replaced, 0 inserted), 0 media query(ies)" in (
            result.output
        )

    def test_stdin(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert"], input="a { top: .5rem; }\n")
        assert result.exit_code == 0
        assert "a { top: 4px; }" in result.output

    def test_output_file(self, stylesheet, tmp_path) -> None:
        out = tmp_path / "out.css"
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text() == (
            "div { margin: 16px; }\n@media (min-width: 20rem) { p { padding: 8px; } }\n"
        )
        assert "div {" not in result.output

    def test_source_file_not_modified(self, stylesheet) -> None:
        before = stylesheet.read_text()
        CliRunner().invoke(cli, ["convert", str(stylesheet)])
        assert stylesheet.read_text() == before

    def test_options(self, stylesheet, tmp_path) -> None:
        out = tmp_path / "out.css"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "convert",
                str(stylesheet),
                "-o",
                str(out),
                "--root-value",
                "10",
                "--media-query",
                "--no-replace",
            ],
        )
        assert result.exit_code == 0
        assert out.read_text() == (
            "div { margin: 2rem; margin: 20px; }\n"
            "@media (min-width: 200px) { p { padding: 1rem; padding: 10px; } }\n"
        )
        assert "(0 replaced, 2 inserted), 1 media query(ies)" in result.output

    def test_prop_and_blacklist_options(self, tmp_path) -> None:
        source = tmp_path / "in.css"
        source.write_text(".a { margin: 1rem; padding: 1rem; }\n.skip { margin: 1rem; }\n")
        out = tmp_path / "out.css"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "convert",
                str(source),
                "-o",
                str(out),
                "--prop",
                "margin",
                "--selector-black-list",
                "/^\\.skip/",
            ],
        )
        assert result.exit_code == 0
        assert out.read_text() == (
            ".a { margin: 8px; padding: 1rem; }\n.skip { margin: 1rem; }\n"
        )

    def test_config_file(self, stylesheet, tmp_path) -> None:
        config = tmp_path / "rem-to-px.json"
        config.write_text(json.dumps({"rootValue": 10, "mediaQuery": True}))
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet), "--config", str(config)])
        assert result.exit_code == 0
        assert "div { margin: 20px; }" in result.output
        assert "@media (min-width: 200px)" in result.output

    def test_flags_override_config_file(self, stylesheet, tmp_path) -> None:
        config = tmp_path / "rem-to-px.json"
        config.write_text(json.dumps({"rootValue": 10}))
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["convert", str(stylesheet), "--config", str(config), "--root-value", "16"],
        )
        assert result.exit_code == 0
        assert "div { margin: 32px; }" in result.output

    def test_invalid_config_file(self, stylesheet, tmp_path) -> None:
        config = tmp_path / "rem-to-px.json"
        config.write_text(json.dumps({"rootValue": -1}))
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet), "--config", str(config)])
        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_unknown_config_option(self, stylesheet, tmp_path) -> None:
        config = tmp_path / "rem-to-px.json"
        config.write_text(json.dumps({"baseFontSize": 16}))
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet), "--config", str(config)])
        assert result.exit_code == 1
        assert "Unknown option" in result.output

    def test_invalid_flag_value(self, stylesheet) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(stylesheet), "--unit-precision=-1"])
        assert result.exit_code == 1
        assert "unitPrecision" in result.output

    def test_parse_error(self, tmp_path) -> None:
        source = tmp_path / "bad.css"
        source.write_text("a { margin: 1rem; }\n}\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(source)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(tmp_path / "nope.css")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_changes(self, stylesheet) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", str(stylesheet)])
        assert result.exit_code == 0
        assert "div { margin: 2rem -> 16px }" in result.output
        assert "p { padding: 1rem -> 8px }" in result.output
        assert "Summary: 2 value(s) would change" in result.output

    def test_media_queries_listed_when_enabled(self, stylesheet) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", str(stylesheet), "--media-query"])
        assert result.exit_code == 0
        assert "@media (min-width: 20rem) -> (min-width: 160px)" in result.output
        assert "Summary: 3 value(s) would change" in result.output

    def test_does_not_modify_file(self, stylesheet) -> None:
        before = stylesheet.read_text()
        CliRunner().invoke(cli, ["inspect", str(stylesheet)])
        assert stylesheet.read_text() == before

    def test_declaration_without_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect"], input="@font-face { size-adjust: 1rem; }")
        assert result.exit_code == 0
        assert "(no selector) { size-adjust: 1rem -> 8px }" in result.output

    def test_nothing_to_change(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect"], input="a { color: red; }")
        assert result.exit_code == 0
        assert "Summary: 0 value(s) would change" in result.output
