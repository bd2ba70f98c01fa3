# tests/test_suggestions.py
"""Tests for the feature suggestion engine."""

from laravel_app_developer.core.suggestions import (
    determine_timeframe,
    identify_innovation_opportunities,
    identify_missing_essentials,
    suggest_features,
)


def test_crm_prioritized_suggestions():
    result = suggest_features("crm", generated_at="2025-01-01T00:00:00+00:00")

    summary = result["suggestion_summary"]
    assert summary["total_suggestions"] == 10
    assert summary["target_users"] == ["general users"]
    assert summary["generated_at"] == "2025-01-01T00:00:00+00:00"

    prioritized = result["feature_suggestions"]["prioritized_features"]
    assert [f["name"] for f in prioritized] == [
        "Contact Management",
        "Task Management",
        "Lead Tracking",
        "Email Integration",
        "Reporting Dashboard",
        "API Access and Integrations",
        "White-label Solution",
        "Social Media Integration",
        "Advanced Analytics and Reporting",
        "Advanced User Management",
    ]
    assert prioritized[0]["priority_score"] == 220


def test_crm_roadmap_and_analysis():
    result = suggest_features("crm")

    roadmap = result["implementation_roadmap"]
    assert [item["name"] for item in roadmap["immediate"]][:2] == ["Contact Management", "Task Management"]
    assert roadmap["timeline_estimates"] == {"immediate": 16, "short_term": 24, "long_term": 0}

    analysis = result["competitive_analysis"]
    assert analysis["market_position"] == "Market position needs improvement - missing critical features"
    assert analysis["competitive_gaps"] == ["Social Media Integration"]
    assert analysis["innovation_potential"].startswith("Limited")

    assert result["market_insights"]["market_trends"][0] == "AI and automation adoption increasing"


def test_current_features_are_filtered_out():
    essentials = identify_missing_essentials("crm", ["contact-management", "Task Management"])
    assert [f.name for f in essentials] == ["Lead Tracking", "Email Integration", "Reporting Dashboard"]


def test_unknown_category_uses_default_pools():
    essentials = identify_missing_essentials("pet grooming", [])
    assert [f.name for f in essentials] == ["User Authentication", "User Dashboard", "Basic Reporting"]
    assert [f.name for f in identify_innovation_opportunities("crm", "mature")] == ["AI-Powered Automation"]


def test_emerging_trends_can_be_disabled():
    result = suggest_features("crm", include_emerging_trends=False)
    assert result["feature_suggestions"]["emerging_trend_features"] == []

    with_trends = suggest_features("crm")
    assert len(with_trends["feature_suggestions"]["emerging_trend_features"]) == 6
    assert with_trends["feature_suggestions"]["emerging_trend_features"][0]["trend"] == "artificial_intelligence"


def test_max_suggestions():
    result = suggest_features("e-commerce", max_suggestions=3)
    assert len(result["feature_suggestions"]["prioritized_features"]) == 3


def test_low_budget_moves_expensive_features_later():
    feature = {"importance": "high", "effort_level": "high", "impact": "high"}
    assert determine_timeframe(feature, budget="low", timeline="no_preference") == "long_term"
    assert determine_timeframe(feature, budget="medium", timeline="no_preference") == "short_term"


def test_timeframe_rules():
    critical = {"importance": "critical", "effort_level": "very_high", "impact": "low"}
    assert determine_timeframe(critical, "low", "long_term") == "immediate"

    quick_win = {"importance": "medium", "effort_level": "low", "impact": "medium"}
    assert determine_timeframe(quick_win, "medium", "immediate") == "immediate"
    assert determine_timeframe(quick_win, "medium", "no_preference") == "short_term"

    moonshot = {"importance": "low", "effort_level": "very_high", "impact": "medium"}
    assert determine_timeframe(moonshot, "high", "no_preference") == "long_term"
