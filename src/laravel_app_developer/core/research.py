"""Market-leader research over the curated competitor catalog."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from .catalog.market_leaders import get_market_leaders
from .models import MarketLeader

logger = logging.getLogger(__name__)

MAX_RESEARCH_LIMIT = 20
STARTUP_CUTOFF_YEAR = 2020
MUST_HAVE_SHARE = 0.7
ADVANTAGE_SHARE = 0.3


def _ranked_counts(values: Iterable[str], top: Optional[int] = None) -> dict[str, int]:
    """Occurrence counts, most frequent first; ties keep first-seen order."""
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if top is not None:
        ranked = ranked[:top]
    return dict(ranked)


def research_category(
    category: str,
    limit: int = 10,
    include_startups: bool = False,
    market_segment: str = "all",
) -> list[MarketLeader]:
    """Pick leaders for a category, filtered by segment and company age."""
    leaders = get_market_leaders(category)

    if market_segment != "all":
        leaders = [leader for leader in leaders if market_segment in leader.market_segments]

    if not include_startups:
        leaders = [leader for leader in leaders if leader.founded_year < STARTUP_CUTOFF_YEAR]

    return leaders[:max(limit, 0)]


def _leader_summary(leader: Optional[MarketLeader]) -> Optional[dict]:
    return leader.model_dump() if leader else None


def _max_by(leaders: list[MarketLeader], attr: str) -> Optional[MarketLeader]:
    """First leader with the strictly largest positive ``attr``."""
    best, best_value = None, 0
    for leader in leaders:
        value = getattr(leader, attr)
        if value > best_value:
            best, best_value = leader, value
    return best


def analyze_market_leaders(leaders: list[MarketLeader]) -> dict:
    analysis = {
        "total_companies": len(leaders),
        "average_valuation": 0,
        "common_features": {},
        "pricing_models": {},
        "technology_trends": {},
        "market_insights": {},
    }

    if not leaders:
        return analysis

    valuations = [leader.valuation for leader in leaders if leader.valuation]
    if valuations:
        analysis["average_valuation"] = sum(valuations) / len(valuations)

    analysis["common_features"] = _ranked_counts(
        (feature for leader in leaders for feature in leader.key_features), top=10
    )
    analysis["pricing_models"] = _ranked_counts(leader.pricing_model for leader in leaders if leader.pricing_model)
    analysis["technology_trends"] = _ranked_counts(
        (tech for leader in leaders for tech in leader.technologies), top=8
    )
    analysis["market_insights"] = {
        "most_funded_company": _leader_summary(_max_by(leaders, "valuation")),
        "newest_company": _leader_summary(_max_by(leaders, "founded_year")),
        "largest_user_base": _leader_summary(_max_by(leaders, "users")),
        "dominant_pricing_model": next(iter(analysis["pricing_models"]), None),
    }
    return analysis


def generate_recommendations(leaders: list[MarketLeader], analysis: dict) -> dict:
    recommendations = {
        "must_have_features": [],
        "competitive_advantages": [],
        "market_opportunities": [
            "Identify features present in less than 30% of market leaders",
            "Focus on underserved customer segments",
            "Explore emerging technology adoption",
            "Consider mobile-first or AI-enhanced features",
        ],
        "pricing_strategy": "",
        "technology_stack": list(analysis["technology_trends"])[:5],
    }

    total = len(leaders)
    if total:
        for feature, count in analysis["common_features"].items():
            share = count / total
            if share >= MUST_HAVE_SHARE:
                recommendations["must_have_features"].append(feature)
            elif share >= ADVANTAGE_SHARE:
                recommendations["competitive_advantages"].append(feature)

    if analysis["pricing_models"]:
        dominant = next(iter(analysis["pricing_models"]))
        recommendations["pricing_strategy"] = f"Consider {dominant} pricing model (used by most competitors)"

    return recommendations


def research_market_leaders(
    category: str,
    limit: int = 10,
    focus_area: str = "all",
    include_startups: bool = False,
    market_segment: str = "all",
    max_competitors: int = MAX_RESEARCH_LIMIT,
    researched_at: Optional[str] = None,
) -> dict:
    """Full research-market-leaders payload."""
    limit = min(limit, MAX_RESEARCH_LIMIT, max_competitors)
    leaders = research_category(category, limit, include_startups, market_segment)
    analysis = analyze_market_leaders(leaders)
    logger.info("Researched %d market leaders for %s", len(leaders), category)

    return {
        "category": category,
        "research_parameters": {
            "limit": limit,
            "focus_area": focus_area,
            "include_startups": include_startups,
            "market_segment": market_segment,
            "research_timestamp": researched_at,
        },
        "market_leaders": [leader.model_dump() for leader in leaders],
        "market_analysis": analysis,
        "recommendations": generate_recommendations(leaders, analysis),
    }
