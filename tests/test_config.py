# tests/test_config.py
"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from laravel_app_developer.config import Settings
from laravel_app_developer.core.analysis import COMPONENT_KINDS, DEFAULT_SCAN_DIRECTORIES


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_env({})

    assert settings.project_root == Path.cwd()
    assert settings.output_directory == Path.cwd() / "development-plans"
    assert settings.template_style == "detailed"
    assert settings.include_estimates is True
    assert settings.include_dependencies is True
    assert settings.scan_directories == list(DEFAULT_SCAN_DIRECTORIES)
    assert settings.extract_features == list(COMPONENT_KINDS)
    assert settings.market_research_enabled is True
    assert settings.max_competitors == 10
    assert settings.tools_exclude == []
    assert settings.log_level == "INFO"


def test_from_env_overrides():
    settings = Settings.from_env({
        "LARAVEL_PROJECT_ROOT": "/srv/app",
        "DEVELOPMENT_PLANS_DIR": "/srv/plans",
        "PLAN_TEMPLATE_STYLE": "Compact",
        "PLAN_INCLUDE_ESTIMATES": "false",
        "PLAN_INCLUDE_DEPENDENCIES": "no",
        "ANALYSIS_SCAN_DIRECTORIES": "app, routes",
        "ANALYSIS_DISABLED_FEATURES": "routes,packages",
        "MARKET_RESEARCH_ENABLED": "0",
        "MARKET_MAX_COMPETITORS": "3",
        "MCP_TOOLS_EXCLUDE": "design-system, suggest-features",
        "LOG_LEVEL": "debug",
    })

    assert settings.project_root == Path("/srv/app")
    assert settings.output_directory == Path("/srv/plans")
    assert settings.template_style == "compact"
    assert settings.include_estimates is False
    assert settings.include_dependencies is False
    assert settings.scan_directories == ["app", "routes"]
    assert "routes" not in settings.extract_features
    assert "packages" not in settings.extract_features
    assert "models" in settings.extract_features
    assert settings.market_research_enabled is False
    assert settings.max_competitors == 3
    assert settings.tools_exclude == ["design-system", "suggest-features"]
    assert settings.log_level == "DEBUG"


def test_output_directory_follows_project_root():
    settings = Settings.from_env({"LARAVEL_PROJECT_ROOT": "/srv/app"})
    assert settings.output_directory == Path("/srv/app/development-plans")


def test_empty_values_fall_back_to_defaults():
    settings = Settings.from_env({"LARAVEL_PROJECT_ROOT": "/srv/app", "PLAN_INCLUDE_ESTIMATES": "", "MARKET_MAX_COMPETITORS": " "})
    assert settings.include_estimates is True
    assert settings.max_competitors == 10


@pytest.mark.parametrize("env", [
    {"MARKET_MAX_COMPETITORS": "many"},
    {"MARKET_MAX_COMPETITORS": "0"},
    {"PLAN_INCLUDE_ESTIMATES": "sometimes"},
    {"PLAN_TEMPLATE_STYLE": "fancy"},
])
def test_invalid_values_raise(env):
    with pytest.raises(ValueError):
        Settings.from_env({"LARAVEL_PROJECT_ROOT": "/srv/app", **env})


def test_render_options():
    settings = Settings(project_root=Path("/srv/app"), output_directory=Path("/srv/plans"), template_style="compact")
    options = settings.render_options()
    assert options.compact is True
    assert options.include_estimates is True
