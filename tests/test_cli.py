"""Tests for the jss command line."""

import json

import pytest
from click.testing import CliRunner

from jss import __version__
from jss.cli import cli


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture()
def style_file(tmp_path):
    path = tmp_path / "style.json"
    path.write_text(
        json.dumps(
            {
                ".": {"display": "block"},
                ".layer": {"background_color": "red"},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestRender:
    def test_compact(self, runner, style_file):
        result = runner.invoke(cli, ["render", str(style_file)])
        assert result.exit_code == 0
        assert result.output == ".{display:block;}.layer{background-color:red;}\n"

    def test_namespace_pretty(self, runner, style_file):
        result = runner.invoke(cli, ["render", "--pretty", "-n", "frame", str(style_file)])
        assert result.exit_code == 0
        assert result.output == (
            "\n.frame {\n    display: block;\n}\n.frame__layer {\n    background-color: red;\n}\n"
        )

    def test_stdin_keeps_duplicate_selectors(self, runner):
        source = '{".a": {"color": "red"}, ".a": {"opacity": 0}}'
        result = runner.invoke(cli, ["render", "-"], input=source)
        assert result.exit_code == 0
        assert result.output == ".a{color:red;}.a{opacity:0;}\n"

    def test_strict_unknown_property(self, runner, tmp_path):
        path = tmp_path / "typo.json"
        path.write_text('{".layer": {"colr": "red"}}', encoding="utf-8")
        result = runner.invoke(cli, ["render", "--strict", str(path)])
        assert result.exit_code == 1
        assert "invalid style name: `colr`" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_object_inside_list_value(self, runner):
        result = runner.invoke(cli, ["render", "-"], input='{".a": {"margin": [{"x": 1}]}}')
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "margin:x 1" not in result.output

    def test_not_utf8(self, runner, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{".a": {"content": "\xff"}}')
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output


class TestResolve:
    def test_names(self, runner):
        result = runner.invoke(cli, ["resolve", "z_index", "gradient_units", "-webkit-box"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["z-index", "gradientUnits", "-webkit-box"]

    def test_strict(self, runner):
        result = runner.invoke(cli, ["resolve", "--strict", "colr"])
        assert result.exit_code == 1


class TestNamespace:
    def test_selector(self, runner):
        result = runner.invoke(cli, ["namespace", "frame", ".hide .corner"])
        assert result.exit_code == 0
        assert result.output == ".frame__hide .frame__corner\n"


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
