# tests/test_design.py
"""Tests for system design from a one-line description."""

import pytest

from laravel_app_developer.core.catalog import systems
from laravel_app_developer.core.design import design_system, generate_system_name, infer_system_type


@pytest.mark.parametrize("description,expected", [
    ("best CRM in the world", "crm"),
    ("an online store for shoes", "e-commerce"),
    ("task management for remote teams", "project-management"),
    ("a learning platform for healthcare workers", "healthcare"),
    ("a weather widget", "custom"),
])
def test_infer_system_type(description, expected):
    assert infer_system_type(description) == expected


def test_system_name_is_deterministic():
    first = generate_system_name("best CRM in the world", "crm")
    assert first == generate_system_name("best CRM in the world", "crm")

    adjective, type_name = first.split(" ", 1)
    assert adjective in systems.NAME_ADJECTIVES
    assert type_name in systems.TYPE_NAMES["crm"]


def test_unknown_type_uses_custom_names():
    name = generate_system_name("something", "spaceship")
    assert name.split(" ", 1)[1] in systems.TYPE_NAMES["custom"]


def test_design_crm():
    result = design_system("best CRM in the world", designed_at="2025-01-01T00:00:00+00:00")

    overview = result["system_overview"]
    assert overview["type"] == "crm"
    assert overview["target_users"] == "general users"
    assert overview["design_timestamp"] == "2025-01-01T00:00:00+00:00"

    design = result["system_design"]
    assert design["name"] == overview["name"]
    assert "Deal" in design["data_model"]
    assert "User" in design["data_model"]
    assert design["technology_stack"]["backend"][0] == "Laravel 11"
    assert "mobile_features" in design["feature_set"]
    assert "ai_features" not in design
    assert "ai_features" not in design["feature_set"]
    assert design["competitive_advantages"][-1] == "Mobile-first design and experience"

    for key in ("implementation_roadmap", "market_analysis", "business_case", "next_steps"):
        assert result[key]


def test_requested_features_join_the_core_set():
    design = design_system(
        "best CRM in the world",
        must_have_features=["Territory Planning"],
        nice_to_have_features=["Voice Notes"],
    )["system_design"]
    core = design["feature_set"]["core_features"]
    assert core[-2:] == ["Territory Planning", "Voice Notes"]


def test_ai_and_mobile_switches():
    design = design_system("best CRM in the world", include_ai_features=True, mobile_first=False)["system_design"]
    assert "machine_learning" in design["ai_features"]
    assert "ai_features" in design["feature_set"]
    assert "mobile_features" not in design["feature_set"]
    assert "AI-powered automation and insights" in design["competitive_advantages"]
    assert "Mobile-first design and experience" not in design["competitive_advantages"]


def test_explicit_type_and_fallbacks():
    result = design_system(
        "something new",
        system_type="education",
        tech_preference="cobol",
        business_model="barter",
        target_users="teachers",
    )
    design = result["system_design"]
    assert result["system_overview"]["type"] == "education"
    assert result["system_overview"]["target_users"] == "teachers"
    assert design["technology_stack"] == systems.TECHNOLOGY_STACKS["laravel"]
    assert design["monetization_strategy"] == systems.MONETIZATION_STRATEGIES["saas"]


def test_node_stack():
    design = design_system("best CRM in the world", tech_preference="node")["system_design"]
    assert design["technology_stack"]["backend"][0] == "Node.js"


def test_designs_do_not_share_state():
    first = design_system("best CRM in the world")
    first["system_design"]["data_model"]["User"].append("mutated")
    first["system_design"]["technology_stack"]["backend"].append("mutated")

    second = design_system("best CRM in the world")
    assert "mutated" not in second["system_design"]["data_model"]["User"]
    assert "mutated" not in second["system_design"]["technology_stack"]["backend"]
