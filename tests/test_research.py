# tests/test_research.py
"""Tests for market-leader research over the curated catalog."""

from laravel_app_developer.core.catalog.market_leaders import get_market_leaders
from laravel_app_developer.core.research import research_market_leaders


def test_crm_research():
    result = research_market_leaders("crm", researched_at="2025-01-01T00:00:00+00:00")

    assert result["category"] == "crm"
    assert result["research_parameters"]["research_timestamp"] == "2025-01-01T00:00:00+00:00"
    assert [leader["name"] for leader in result["market_leaders"]] == [
        "Salesforce", "HubSpot", "Pipedrive", "Monday.com", "Zoho CRM",
    ]

    analysis = result["market_analysis"]
    assert analysis["total_companies"] == 5
    assert analysis["average_valuation"] == 56_020_000_000
    assert len(analysis["common_features"]) == 10
    assert analysis["common_features"]["contact management"] == 4
    assert list(analysis["common_features"])[:2] == ["contact management", "mobile app"]
    assert analysis["pricing_models"] == {"subscription": 4, "freemium": 1}


def test_crm_market_insights():
    insights = research_market_leaders("crm")["market_analysis"]["market_insights"]
    assert insights["most_funded_company"]["name"] == "Salesforce"
    assert insights["newest_company"]["name"] == "Monday.com"
    assert insights["largest_user_base"]["name"] == "Zoho CRM"
    assert insights["dominant_pricing_model"] == "subscription"


def test_crm_recommendations():
    recommendations = research_market_leaders("crm")["recommendations"]
    assert recommendations["must_have_features"] == ["contact management", "mobile app"]
    assert len(recommendations["competitive_advantages"]) == 8
    assert "lead management" in recommendations["competitive_advantages"]
    assert recommendations["pricing_strategy"] == "Consider subscription pricing model (used by most competitors)"
    assert recommendations["technology_stack"] == ["cloud", "mobile", "api", "saas", "ai"]


def test_limit_is_capped():
    assert len(research_market_leaders("crm", limit=2)["market_leaders"]) == 2
    assert research_market_leaders("crm", limit=50)["research_parameters"]["limit"] == 20
    assert research_market_leaders("crm", limit=10, max_competitors=3)["research_parameters"]["limit"] == 3


def test_market_segment_filter():
    result = research_market_leaders("project management", market_segment="consumer")
    assert [leader["name"] for leader in result["market_leaders"]] == ["Trello", "Notion"]


def test_similar_category_fallback():
    assert [leader.name for leader in get_market_leaders("CRM")] == [leader.name for leader in get_market_leaders("crm")]
    assert len(get_market_leaders("project management software")) == 5


def test_unknown_category_is_empty():
    result = research_market_leaders("underwater basket weaving")
    assert result["market_leaders"] == []
    assert result["market_analysis"]["total_companies"] == 0
    assert result["recommendations"]["must_have_features"] == []
    assert result["recommendations"]["pricing_strategy"] == ""
