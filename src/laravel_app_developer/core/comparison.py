"""Feature comparison against market leaders.

Builds a feature-frequency table from the leaders' key features, marks each
market feature present or missing in the caller's application, and derives
the gap analysis and an action plan from it.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Optional

from .matching import has_feature, normalize_features
from .models import FeatureCoverage
from .research import research_market_leaders
from .scoring import (
    DEFAULT_PRIORITY_THRESHOLD,
    OPPORTUNITY_THRESHOLD,
    analyze_competitive_position,
    analyze_gaps,
    calculate_priority,
)

logger = logging.getLogger(__name__)

TECH_RECOMMENDATION_MIN_COMPETITORS = 3

COMPLEX_FEATURE_KEYWORDS = ("ai", "machine learning", "analytics", "reporting", "automation", "integration")
MEDIUM_FEATURE_KEYWORDS = ("user management", "authentication", "notifications", "search", "dashboard")

LONG_TERM_STRATEGY = [
    "Leverage unique features as competitive advantages",
    "Monitor emerging trends in the market",
    "Focus on user experience improvements",
    "Consider API integrations for missing features",
]


def estimate_effort(feature: str) -> int:
    """Rough development effort in weeks, from keywords in the feature name."""
    feature = feature.lower()
    if any(keyword in feature for keyword in COMPLEX_FEATURE_KEYWORDS):
        return 6
    if any(keyword in feature for keyword in MEDIUM_FEATURE_KEYWORDS):
        return 3
    return 2


def compare_technology(market_analysis: dict) -> dict:
    trends = market_analysis.get("technology_trends") or {}
    return {
        "trending_technologies": trends,
        "recommendations": [
            f"Consider adopting {tech} (used by {count} competitors)"
            for tech, count in trends.items()
            if count >= TECH_RECOMMENDATION_MIN_COMPETITORS
        ],
    }


def perform_comparison(
    current_features: list[str],
    market_data: Optional[dict],
    focus: str = "comprehensive",
    priority_threshold: int = DEFAULT_PRIORITY_THRESHOLD,
) -> dict:
    """Classify every market feature as present or missing."""
    comparison = {
        "features_present": [],
        "features_missing": [],
        "unique_features": [],
        "market_coverage": [],
        "technology_comparison": [],
    }

    if not market_data or not market_data.get("market_leaders"):
        return comparison

    leaders = market_data["market_leaders"]
    frequency = Counter(feature for leader in leaders for feature in leader.get("key_features", []))
    total_competitors = len(leaders)

    normalized_current = normalize_features(current_features)
    market_features = list(frequency)

    for market_feature in market_features:
        count = frequency[market_feature]
        adoption = count / total_competitors * 100
        coverage = FeatureCoverage(
            feature=market_feature,
            market_adoption=adoption,
            competitor_count=count,
            priority=calculate_priority(adoption, priority_threshold),
        ).model_dump()

        if has_feature(market_feature, normalized_current):
            comparison["features_present"].append(coverage)
        else:
            comparison["features_missing"].append(coverage)
        comparison["market_coverage"].append(coverage)

    for current in normalized_current:
        if not has_feature(current, market_features):
            comparison["unique_features"].append({
                "feature": current,
                "competitive_advantage": True,
                "market_gap": True,
            })

    if focus in ("technology", "comprehensive"):
        comparison["technology_comparison"] = compare_technology(market_data.get("market_analysis") or {})

    for key in ("features_missing", "features_present", "market_coverage"):
        comparison[key].sort(key=lambda item: item["market_adoption"], reverse=True)

    return comparison


def _adoption_label(adoption: float) -> str:
    return f"{adoption:g}"


def generate_action_plan(comparison: dict, priority_threshold: int = DEFAULT_PRIORITY_THRESHOLD) -> dict:
    immediate, short_term = [], []

    for feature in comparison["features_missing"]:
        adoption = feature["market_adoption"]
        if adoption >= priority_threshold:
            immediate.append({
                "action": f"Implement {feature['feature']}",
                "rationale": f"Present in {feature['competitor_count']} competitors ({_adoption_label(adoption)}% market adoption)",
                "priority": "high",
                "estimated_effort": estimate_effort(feature["feature"]),
            })
        elif adoption >= OPPORTUNITY_THRESHOLD:
            short_term.append({
                "action": f"Consider implementing {feature['feature']}",
                "rationale": f"Growing market trend ({_adoption_label(adoption)}% adoption)",
                "priority": "medium",
                "estimated_effort": estimate_effort(feature["feature"]),
            })

    immediate_weeks = sum(action["estimated_effort"] for action in immediate)
    short_term_weeks = sum(action["estimated_effort"] for action in short_term)

    return {
        "immediate_actions": immediate,
        "short_term_goals": short_term,
        "long_term_strategy": list(LONG_TERM_STRATEGY),
        "estimated_development_time": {
            "immediate_features": immediate_weeks,
            "short_term_features": short_term_weeks,
            "total_estimated_weeks": immediate_weeks + short_term_weeks,
        },
    }


def compare_features(
    category: str,
    current_features: Optional[list[str]] = None,
    market_leaders_data: Optional[dict] = None,
    comparison_focus: str = "comprehensive",
    priority_threshold: int = DEFAULT_PRIORITY_THRESHOLD,
    compared_at: Optional[str] = None,
) -> dict:
    """Full compare-features payload.

    ``market_leaders_data`` is the output of research-market-leaders (or any
    dict with a ``market_leaders`` list). Without it the curated research for
    ``category`` is used; an unknown category leaves nothing to compare
    against and the gaps come out empty.
    """
    current_features = current_features or []
    market_data = market_leaders_data or research_market_leaders(category)

    comparison = perform_comparison(current_features, market_data, comparison_focus, priority_threshold)

    missing = [FeatureCoverage(**f) for f in comparison["features_missing"]]
    present = [FeatureCoverage(**f) for f in comparison["features_present"]]
    unique = [f["feature"] for f in comparison["unique_features"]]
    total = len(comparison["market_coverage"])

    gaps = analyze_gaps(missing, total, priority_threshold)
    position = analyze_competitive_position(present, missing, unique, total)
    logger.info(
        "Compared %d features against %d market features for %s (gap score %.1f)",
        len(current_features), total, category, gaps.gap_score,
    )

    return {
        "comparison_summary": {
            "category": category,
            "focus_area": comparison_focus,
            "priority_threshold": priority_threshold,
            "comparison_timestamp": compared_at,
        },
        "feature_comparison": comparison,
        "gap_analysis": gaps.model_dump(),
        "competitive_positioning": position.model_dump(),
        "action_plan": generate_action_plan(comparison, priority_threshold),
    }
