# tests/test_server.py
"""Tests for the MCP tool layer."""

import asyncio

import pytest

from laravel_app_developer import server
from laravel_app_developer.config import Settings


@pytest.fixture
def configured(settings, monkeypatch):
    monkeypatch.setattr(server, "get_settings", lambda: settings)
    return settings


def test_generate_development_plan_writes_markdown(configured):
    result = asyncio.run(server.generate_development_plan(
        "Shop", "An online shop", features=["login"], complexity="simple",
    ))

    assert result["success"] is True
    path = configured.output_directory / "DEVELOPMENT_PLAN.md"
    assert result["file_path"] == str(path)
    content = path.read_text(encoding="utf-8")
    assert "Task #1" in content
    assert "- [ ]" in content

    assert result["plan_summary"]["total_tasks"] == 8
    assert result["plan_summary"]["total_phases"] == 6
    assert result["plan_structure"]["includes_testing"] is True
    assert result["ai_instructions"]


def test_generate_development_plan_uses_render_settings(settings, monkeypatch):
    compact = settings.model_copy(update={"template_style": "compact", "include_estimates": False})
    monkeypatch.setattr(server, "get_settings", lambda: compact)

    result = asyncio.run(server.generate_development_plan("Shop", "An online shop", output_file="ROADMAP.md"))
    content = (compact.output_directory / "ROADMAP.md").read_text(encoding="utf-8")
    assert result["success"] is True
    assert "Team Structure" not in content
    assert "Estimated Hours" not in content


def test_generate_development_plan_writes_microservices(configured):
    result = asyncio.run(server.generate_development_plan(
        "Mesh", "services", project_type="microservice", features=["billing"],
    ))

    content = (configured.output_directory / "DEVELOPMENT_PLAN.md").read_text(encoding="utf-8")
    assert result["success"] is True
    assert "- billing Service" in content
    assert "### Data Flow" in content
    assert "### Security Considerations" in content


def test_generate_development_plan_rejects_paths(configured):
    result = asyncio.run(server.generate_development_plan("Shop", "An online shop", output_file="../evil.md"))
    assert result["error"].startswith("Failed to generate development plan:")
    assert not (configured.project_root / "evil.md").exists()


def test_analyze_application(configured, laravel_project, monkeypatch):
    project = configured.model_copy(update={"project_root": laravel_project})
    monkeypatch.setattr(server, "get_settings", lambda: project)

    result = asyncio.run(server.analyze_application())
    assert result["application_info"]["name"] == "Acme Shop"
    assert result["application_info"]["analysis_timestamp"]
    assert result["summary"]["total_components"] == 7


def test_analyze_application_honors_disabled_features(configured, laravel_project, monkeypatch):
    project = configured.model_copy(update={"project_root": laravel_project, "extract_features": ["models"]})
    monkeypatch.setattr(server, "get_settings", lambda: project)

    result = asyncio.run(server.analyze_application())
    assert list(result["feature_analysis"]) == ["models"]


def test_analyze_application_invalid_focus(configured):
    result = asyncio.run(server.analyze_application(focus_area="everything"))
    assert result["error"].startswith("Failed to analyze application:")


def test_research_market_leaders(configured):
    result = asyncio.run(server.research_market_leaders("crm", limit=3))
    assert len(result["market_leaders"]) == 3
    assert result["research_parameters"]["research_timestamp"]


def test_research_respects_max_competitors(settings, monkeypatch):
    limited = settings.model_copy(update={"max_competitors": 2})
    monkeypatch.setattr(server, "get_settings", lambda: limited)
    result = asyncio.run(server.research_market_leaders("crm"))
    assert result["research_parameters"]["limit"] == 2


def test_research_disabled(settings, monkeypatch):
    disabled = settings.model_copy(update={"market_research_enabled": False})
    monkeypatch.setattr(server, "get_settings", lambda: disabled)

    result = asyncio.run(server.research_market_leaders("crm"))
    assert result == {"error": "Failed to research market leaders: market research is disabled"}

    comparison = asyncio.run(server.compare_features("crm", ["contact management"]))
    assert comparison["feature_comparison"]["market_coverage"] == []


def test_compare_features_falls_back_to_research(configured):
    result = asyncio.run(server.compare_features("crm", ["Contact Management", "mobile-app"]))
    assert result["gap_analysis"]["market_readiness"] == "fair"
    assert result["comparison_summary"]["comparison_timestamp"]


def test_suggest_features(configured):
    result = asyncio.run(server.suggest_features("crm", max_suggestions=5))
    assert result["suggestion_summary"]["total_suggestions"] == 5


def test_design_system(configured):
    result = asyncio.run(server.design_system("best CRM in the world"))
    assert result["system_overview"]["type"] == "crm"


def test_open_app_developer(configured):
    result = asyncio.run(server.open_app_developer())
    assert result["project_root"] == str(configured.project_root)
    assert result["market_categories"] == ["crm", "e-commerce", "project management"]
    assert len(result["tools"]) == 7


def test_create_server_registers_all_tools(settings):
    mcp = server.create_server(settings)
    names = {tool.name for tool in asyncio.run(mcp.list_tools())}
    assert names == {entry.name for entry in server.TOOLS}


def test_create_server_excludes_tools(tmp_path):
    settings = Settings(
        project_root=tmp_path,
        output_directory=tmp_path / "plans",
        tools_exclude=["design-system", "suggest-features"],
    )
    mcp = server.create_server(settings)
    tools = {tool.name: tool for tool in asyncio.run(mcp.list_tools())}

    assert "design-system" not in tools
    assert "suggest-features" not in tools
    assert tools["generate-development-plan"].annotations.readOnlyHint is False
    assert tools["research-market-leaders"].annotations.readOnlyHint is True
