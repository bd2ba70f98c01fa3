# tests/test_cli.py
"""Tests for the command line interface."""

import json

from click.testing import CliRunner


def test_version():
    from laravel_app_developer import __version__
    from laravel_app_developer.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert f"laravel-app-developer v{__version__}" in result.output


def test_install_writes_client_config(tmp_path, monkeypatch):
    from laravel_app_developer.cli import main

    monkeypatch.setenv("LARAVEL_PROJECT_ROOT", str(tmp_path))
    monkeypatch.delenv("DEVELOPMENT_PLANS_DIR", raising=False)

    runner = CliRunner()
    result = runner.invoke(main, ["install"])

    assert result.exit_code == 0
    config = json.loads((tmp_path / ".mcp.json").read_text())
    server = config["mcpServers"]["laravel-app-developer"]
    assert server["command"] == "laravel-app-developer-mcp"
    assert server["env"]["LARAVEL_PROJECT_ROOT"] == str(tmp_path)
    assert (tmp_path / "development-plans").is_dir()
    assert "installed successfully" in result.output


def test_install_keeps_existing_config_without_force(tmp_path, monkeypatch):
    from laravel_app_developer.cli import main

    monkeypatch.setenv("LARAVEL_PROJECT_ROOT", str(tmp_path))
    (tmp_path / ".mcp.json").write_text("{}")

    runner = CliRunner()
    result = runner.invoke(main, ["install"])

    assert result.exit_code == 0
    assert (tmp_path / ".mcp.json").read_text() == "{}"
    assert "--force" in " ".join(result.output.split())

    result = runner.invoke(main, ["install", "--force"])
    assert result.exit_code == 0
    assert "mcpServers" in json.loads((tmp_path / ".mcp.json").read_text())


def test_help_lists_commands():
    from laravel_app_developer.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    for command in ("install", "serve", "version"):
        assert command in result.output
