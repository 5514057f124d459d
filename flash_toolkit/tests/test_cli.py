"""Tests for the flash-toolkit command line."""

import pytest
import typer
from typer.testing import CliRunner

from conftest import write
from flash_toolkit.cli import app
from flash_toolkit.cli.parsers import parse_arg, parse_file_mode

runner = CliRunner()


@pytest.fixture
def env(monkeypatch, theme_dir, plugin_dir):
    monkeypatch.delenv("FLASH_TOOLKIT_TEMPLATE_DEBUG_MODE", raising=False)
    monkeypatch.delenv("FLASH_TOOLKIT_OPTIONS_FILE", raising=False)
    monkeypatch.setenv("FLASH_TOOLKIT_PLUGIN_PATH", str(plugin_dir))
    monkeypatch.setenv("FLASH_TOOLKIT_STYLESHEET_DIR", str(theme_dir))


def test_parse_arg_decodes_json_values():
    assert parse_arg("count=3") == ("count", 3)
    assert parse_arg("tags=[\"a\"]") == ("tags", ["a"])
    assert parse_arg("title=Hello world") == ("title", "Hello world")


@pytest.mark.parametrize("value", ["novalue", "bad key=1", "=1"])
def test_parse_arg_rejects_malformed(value):
    with pytest.raises(typer.BadParameter):
        parse_arg(value)


def test_parse_file_mode():
    assert parse_file_mode("0600") == 0o600
    with pytest.raises(typer.BadParameter):
        parse_file_mode("9x")


def test_locate_prints_override(env, theme_dir):
    override = write(theme_dir / "flash-toolkit" / "card.html", "x")
    result = runner.invoke(app, ["locate", "card.html"])
    assert result.exit_code == 0
    assert result.stdout.strip() == str(override)


def test_locate_debug_flag_uses_bundled(env, theme_dir, plugin_dir):
    write(theme_dir / "flash-toolkit" / "card.html", "x")
    write(plugin_dir / "templates" / "card.html", "bundled")
    result = runner.invoke(app, ["locate", "card.html", "--debug"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"{plugin_dir}/templates/card.html"


def test_render_to_stdout(env, plugin_dir):
    write(plugin_dir / "templates" / "hello.txt", "Hello {{ name }} x{{ count + 1 }}")
    result = runner.invoke(app, ["render", "hello.txt", "--arg", "name=Flash", "--arg", "count=2"])
    assert result.exit_code == 0
    assert result.stdout == "Hello Flash x3"


def test_render_to_file(env, plugin_dir, tmp_path):
    write(plugin_dir / "templates" / "hello.txt", "Hello")
    target = tmp_path / "out" / "hello.txt"

    result = runner.invoke(app, ["render", "hello.txt", "--output", str(target), "--mode", "0600"])

    assert result.exit_code == 0
    assert target.read_text() == "Hello"
    assert target.stat().st_mode & 0o777 == 0o600


def test_render_missing_template_exits_nonzero(env):
    result = runner.invoke(app, ["render", "missing.txt"])
    assert result.exit_code == 1


def test_icons_search(env):
    result = runner.invoke(app, ["icons", "--search", "youtube"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "fa-youtube\tYoutube" in lines
    assert all("youtube" in line.lower() for line in lines)
