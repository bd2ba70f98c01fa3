"""Feature suggestion engine.

Collects candidates from the essential / competitive / innovation / UX /
revenue / trend pools, drops the ones the application already ships,
and ranks the rest with the prioritization scorer.
"""

from __future__ import annotations

import logging
from typing import Optional

from .catalog import features as catalog
from .matching import has_feature
from .models import FeatureSuggestion
from .scoring import prioritize_features

logger = logging.getLogger(__name__)

TIMEFRAMES = ("immediate", "short_term", "long_term")

IMPLEMENTATION_WEEKS = {
    "low": 2,
    "medium": 4,
    "high": 8,
    "very_high": 16,
}
DEFAULT_IMPLEMENTATION_WEEKS = 4


def identify_missing_essentials(category: str, current_features: list[str]) -> list[FeatureSuggestion]:
    pool = catalog.ESSENTIAL_FEATURES.get(category, catalog.DEFAULT_ESSENTIAL_FEATURES)
    return [
        FeatureSuggestion(
            name=f["name"],
            description=f["description"],
            importance="critical",
            category="essential",
            effort_level=f["effort"],
            impact="high",
            rationale=f"Essential feature missing - present in 90%+ of {category} applications",
        )
        for f in pool
        if not has_feature(f["name"], current_features)
    ]


def identify_competitive_features(category: str, current_features: list[str]) -> list[FeatureSuggestion]:
    pool = catalog.COMPETITIVE_FEATURES.get(category, [])
    return [
        FeatureSuggestion(
            name=f["name"],
            description=f["description"],
            importance="high",
            category="competitive",
            effort_level=f["effort"],
            impact="medium-high",
            rationale=f"Competitive advantage - {f['market_adoption']}% market adoption",
        )
        for f in pool
        if not has_feature(f["name"], current_features)
    ]


def identify_innovation_opportunities(category: str, business_stage: str) -> list[FeatureSuggestion]:
    """Innovations are forward-looking, so they are never filtered by current features."""
    pool = catalog.INNOVATION_OPPORTUNITIES.get(category, {}).get(business_stage) or catalog.DEFAULT_INNOVATIONS
    return [
        FeatureSuggestion(
            name=f["name"],
            description=f["description"],
            importance="medium",
            category="innovation",
            effort_level=f["effort"],
            impact=f["impact"],
            rationale=f["rationale"],
        )
        for f in pool
    ]


def _from_pool(pool: list[dict], importance: str, category: str, current_features: list[str]) -> list[FeatureSuggestion]:
    return [
        FeatureSuggestion(
            name=f["name"],
            description=f["description"],
            importance=importance,
            category=category,
            effort_level=f["effort"],
            impact=f["impact"],
            rationale=f["rationale"],
            trend=f.get("trend"),
        )
        for f in pool
        if not has_feature(f["name"], current_features)
    ]


def identify_ux_improvements(current_features: list[str]) -> list[FeatureSuggestion]:
    return _from_pool(catalog.UX_IMPROVEMENTS, "medium", "user_experience", current_features)


def identify_revenue_features(current_features: list[str]) -> list[FeatureSuggestion]:
    return _from_pool(catalog.REVENUE_FEATURES, "high", "revenue_growth", current_features)


def identify_trend_features(current_features: list[str]) -> list[FeatureSuggestion]:
    return _from_pool(catalog.TREND_FEATURES, "low", "emerging_trends", current_features)


def generate_feature_suggestions(
    category: str,
    current_features: list[str],
    business_stage: str = "growth",
    focus: str = "all",
    include_trends: bool = True,
    max_suggestions: int = 10,
    budget: str = "medium",
) -> dict:
    """Build every candidate pool and the prioritized top-N list."""
    pools = {
        "missing_essential_features": identify_missing_essentials(category, current_features),
        "competitive_features": identify_competitive_features(category, current_features),
        "innovation_opportunities": identify_innovation_opportunities(category, business_stage),
        "user_experience_improvements": identify_ux_improvements(current_features),
        "revenue_enhancement_features": identify_revenue_features(current_features),
        "emerging_trend_features": identify_trend_features(current_features) if include_trends else [],
    }

    candidates = [feature for pool in pools.values() for feature in pool]
    prioritized = prioritize_features(candidates, focus=focus, budget=budget, max_suggestions=max_suggestions)
    logger.info("Suggested %d of %d candidate features for %s", len(prioritized), len(candidates), category)

    suggestions = {name: [f.model_dump(exclude_none=True) for f in pool] for name, pool in pools.items()}
    suggestions["prioritized_features"] = [f.model_dump(exclude_none=True) for f in prioritized]
    return suggestions


def determine_timeframe(feature: dict, budget: str, timeline: str) -> str:
    """Place a prioritized feature on the roadmap. Rules apply in order."""
    effort = feature.get("effort_level")

    if feature.get("importance") == "critical":
        return "immediate"
    if budget == "low" and effort in ("high", "very_high"):
        return "long_term"
    if timeline == "immediate" and effort == "low":
        return "immediate"
    if feature.get("impact") == "high" and effort == "medium":
        return "short_term"
    if effort == "very_high":
        return "long_term"
    return "short_term"


def estimate_implementation_time(effort: Optional[str]) -> int:
    return IMPLEMENTATION_WEEKS.get(effort, DEFAULT_IMPLEMENTATION_WEEKS)


def generate_implementation_roadmap(prioritized: list[dict], budget: str, timeline: str) -> dict:
    roadmap: dict = {timeframe: [] for timeframe in TIMEFRAMES}

    for feature in prioritized:
        timeframe = determine_timeframe(feature, budget, timeline)
        roadmap[timeframe].append({
            "name": feature["name"],
            "description": feature["description"],
            "effort": feature["effort_level"],
            "impact": feature["impact"],
            "estimated_weeks": estimate_implementation_time(feature["effort_level"]),
        })

    roadmap["timeline_estimates"] = {
        timeframe: sum(item["estimated_weeks"] for item in roadmap[timeframe])
        for timeframe in TIMEFRAMES
    }
    return roadmap


def generate_market_insights(category: str) -> dict:
    return {
        "market_trends": catalog.MARKET_TRENDS.get(category, catalog.DEFAULT_MARKET_TRENDS),
        "user_expectations": list(catalog.USER_EXPECTATIONS),
        "technology_shifts": list(catalog.TECHNOLOGY_SHIFTS),
        "competitive_pressures": list(catalog.COMPETITIVE_PRESSURES),
    }


def assess_market_position(prioritized: list[dict]) -> str:
    critical_missing = sum(1 for f in prioritized if f.get("importance") == "critical")
    if critical_missing == 0:
        return "Strong market position with essential features covered"
    elif critical_missing <= 2:
        return "Good market position with minor gaps to address"
    return "Market position needs improvement - missing critical features"


def assess_innovation_potential(prioritized: list[dict]) -> str:
    innovation_count = sum(1 for f in prioritized if f.get("category") in ("innovation", "emerging_trends"))
    if innovation_count >= 3:
        return "High innovation potential with multiple cutting-edge opportunities"
    elif innovation_count >= 1:
        return "Moderate innovation potential with some advanced features"
    return "Limited innovation opportunities - focus on essential features first"


def generate_competitive_analysis(prioritized: list[dict]) -> dict:
    differentiation = [f["name"] for f in prioritized if f.get("category") in ("innovation", "emerging_trends")]
    gaps = [f["name"] for f in prioritized if f.get("category") == "competitive"]
    return {
        "market_position": assess_market_position(prioritized),
        "differentiation_opportunities": differentiation[:3],
        "competitive_gaps": gaps[:5],
        "innovation_potential": assess_innovation_potential(prioritized),
    }


def suggest_features(
    app_category: str,
    current_features: Optional[list[str]] = None,
    target_users: Optional[list[str]] = None,
    business_stage: str = "growth",
    suggestion_focus: str = "all",
    include_emerging_trends: bool = True,
    max_suggestions: int = 10,
    budget_consideration: str = "medium",
    development_timeline: str = "no_preference",
    generated_at: Optional[str] = None,
) -> dict:
    """Full suggest-features payload: suggestions, roadmap, insights, analysis."""
    current_features = current_features or []

    suggestions = generate_feature_suggestions(
        category=app_category,
        current_features=current_features,
        business_stage=business_stage,
        focus=suggestion_focus,
        include_trends=include_emerging_trends,
        max_suggestions=max_suggestions,
        budget=budget_consideration,
    )
    prioritized = suggestions["prioritized_features"]

    return {
        "suggestion_summary": {
            "app_category": app_category,
            "business_stage": business_stage,
            "focus_area": suggestion_focus,
            "target_users": target_users or ["general users"],
            "total_suggestions": len(prioritized),
            "generated_at": generated_at,
        },
        "feature_suggestions": suggestions,
        "implementation_roadmap": generate_implementation_roadmap(prioritized, budget_consideration, development_timeline),
        "market_insights": generate_market_insights(app_category),
        "competitive_analysis": generate_competitive_analysis(prioritized),
    }
