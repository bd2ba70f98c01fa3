# tests/test_comparison.py
"""Tests for feature comparison against market leaders."""

import pytest

from laravel_app_developer.core.comparison import compare_features, estimate_effort, perform_comparison


def test_compare_against_curated_crm():
    result = compare_features("crm", ["Contact Management", "mobile-app"])

    comparison = result["feature_comparison"]
    assert [f["feature"] for f in comparison["features_present"]] == ["contact management", "mobile app"]
    assert len(comparison["features_missing"]) == 23
    assert len(comparison["market_coverage"]) == 25
    assert comparison["unique_features"] == []

    gaps = result["gap_analysis"]
    assert gaps["critical_gaps"] == []
    assert len(gaps["opportunity_gaps"]) == 8
    assert gaps["gap_score"] == pytest.approx(32.0)
    assert gaps["market_readiness"] == "fair"

    position = result["competitive_positioning"]
    assert position["competitive_score"] == pytest.approx(8.0)
    assert position["strength_areas"] == ["contact management", "mobile app"]
    assert position["weakness_areas"] == []


def test_action_plan_for_curated_crm():
    plan = compare_features("crm", ["Contact Management", "mobile-app"])["action_plan"]

    assert plan["immediate_actions"] == []
    assert len(plan["short_term_goals"]) == 8
    first = plan["short_term_goals"][0]
    assert first["action"] == "Consider implementing lead management"
    assert first["rationale"] == "Growing market trend (60% adoption)"
    assert first["priority"] == "medium"
    assert plan["estimated_development_time"] == {
        "immediate_features": 0,
        "short_term_features": 40,
        "total_estimated_weeks": 40,
    }


def test_unique_features_add_innovation_bonus():
    result = compare_features("crm", ["Contact Management", "mobile-app", "Blockchain Ledger"])
    assert [f["feature"] for f in result["feature_comparison"]["unique_features"]] == ["blockchain ledger"]
    assert result["competitive_positioning"]["differentiation_opportunities"] == ["blockchain ledger"]
    assert result["competitive_positioning"]["competitive_score"] == pytest.approx(13.0)


def test_caller_supplied_market_data():
    market_data = {"market_leaders": [{"key_features": ["a", "b"]}, {"key_features": ["a"]}]}
    result = compare_features("custom", ["a"], market_leaders_data=market_data)

    assert result["gap_analysis"]["gap_score"] == 50
    assert result["gap_analysis"]["market_readiness"] == "fair"
    # "b" sits at 50% adoption: an opportunity, not critical
    assert [f["feature"] for f in result["gap_analysis"]["opportunity_gaps"]] == ["b"]


def test_critical_gaps_and_immediate_actions():
    leaders = [{"key_features": ["payments", "inventory", "reporting"]} for _ in range(3)]
    leaders.append({"key_features": ["chat"]})
    features = ["chat", "x1", "x2", "x3", "x4", "x5", "x6"]
    leaders.append({"key_features": features})
    result = compare_features("shop", [], market_leaders_data={"market_leaders": leaders})

    gaps = result["gap_analysis"]
    assert [f["feature"] for f in gaps["critical_gaps"]] == []
    assert len(gaps["opportunity_gaps"]) == 4

    threshold_result = compare_features(
        "shop", [], market_leaders_data={"market_leaders": leaders}, priority_threshold=60
    )
    critical = threshold_result["gap_analysis"]["critical_gaps"]
    assert [f["feature"] for f in critical] == ["payments", "inventory", "reporting"]
    actions = threshold_result["action_plan"]["immediate_actions"]
    assert actions[0]["action"] == "Implement payments"
    assert actions[0]["rationale"] == "Present in 3 competitors (60% market adoption)"
    assert actions[2]["estimated_effort"] == 6


def test_three_critical_of_ten_needs_improvement():
    leaders = [{"key_features": ["a", "b", "c"]}, {"key_features": ["a", "b", "c"]}]
    leaders.append({"key_features": ["d", "e", "f", "g", "h", "i", "j"]})
    leaders.append({"key_features": ["a", "b", "c"]})
    result = compare_features("custom", ["d", "e", "f", "g", "h", "i", "j"], market_leaders_data={"market_leaders": leaders})

    gaps = result["gap_analysis"]
    assert len(gaps["critical_gaps"]) == 3
    assert gaps["gap_score"] == 90
    assert gaps["market_readiness"] == "needs_improvement"


def test_unknown_category_has_nothing_to_compare():
    result = compare_features("underwater basket weaving", ["anything"])
    assert result["feature_comparison"]["market_coverage"] == []
    assert result["gap_analysis"]["gap_score"] == 0
    assert result["gap_analysis"]["market_readiness"] == "excellent"
    assert result["competitive_positioning"]["competitive_score"] == 0


def test_technology_comparison_depends_on_focus():
    market_data = {
        "market_leaders": [{"key_features": ["a"]}],
        "market_analysis": {"technology_trends": {"cloud": 5, "ai": 2}},
    }
    comprehensive = perform_comparison(["a"], market_data, focus="comprehensive")
    assert comprehensive["technology_comparison"]["recommendations"] == [
        "Consider adopting cloud (used by 5 competitors)"
    ]
    assert perform_comparison(["a"], market_data, focus="pricing")["technology_comparison"] == []


@pytest.mark.parametrize("feature,weeks", [
    ("Advanced Analytics", 6),
    ("email integration", 6),
    ("User Management", 3),
    ("global search", 3),
    ("customization", 2),
])
def test_estimate_effort(feature, weeks):
    assert estimate_effort(feature) == weeks
