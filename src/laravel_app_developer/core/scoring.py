"""Feature prioritization and gap scoring engine.

Turns raw feature lists into ranked suggestions and market-gap scores.
Everything here is deterministic arithmetic over the weight tables below.
Unknown vocabulary values weigh 0 instead of raising.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import (
    Budget,
    CompetitivePosition,
    EffortLevel,
    FeatureCategory,
    FeatureCoverage,
    FeatureSuggestion,
    GapAnalysis,
    Impact,
    Importance,
)

logger = logging.getLogger(__name__)

IMPORTANCE_WEIGHTS = {
    Importance.CRITICAL: 100,
    Importance.HIGH: 75,
    Importance.MEDIUM: 50,
    Importance.LOW: 25,
}

IMPACT_WEIGHTS = {
    Impact.VERY_HIGH: 50,
    Impact.HIGH: 40,
    Impact.MEDIUM_HIGH: 35,
    Impact.MEDIUM: 30,
    Impact.LOW: 10,
}

# Inverse of cost: cheaper features score higher
EFFORT_WEIGHTS = {
    EffortLevel.LOW: 30,
    EffortLevel.MEDIUM: 20,
    EffortLevel.HIGH: 10,
    EffortLevel.VERY_HIGH: 5,
}

CATEGORY_WEIGHTS = {
    FeatureCategory.ESSENTIAL: 50,
    FeatureCategory.COMPETITIVE: 30,
    FeatureCategory.USER_EXPERIENCE: 25,
    FeatureCategory.REVENUE_GROWTH: 35,
    FeatureCategory.INNOVATION: 15,
    FeatureCategory.EMERGING_TRENDS: 10,
}

FOCUS_BONUS = 25
LOW_BUDGET_PENALTY = 20
EXPENSIVE_EFFORTS = (EffortLevel.HIGH, EffortLevel.VERY_HIGH)

DEFAULT_PRIORITY_THRESHOLD = 70
OPPORTUNITY_THRESHOLD = 40
STRENGTH_THRESHOLD = 70


def score_feature(feature: FeatureSuggestion, focus: str = "all", budget: str = "medium") -> int:
    """Compute the priority score for a single candidate feature."""
    score = IMPORTANCE_WEIGHTS.get(feature.importance, 0)
    score += IMPACT_WEIGHTS.get(feature.impact, 0)
    score += EFFORT_WEIGHTS.get(feature.effort_level, 0)

    if focus != "all" and feature.category == focus:
        score += FOCUS_BONUS

    score += CATEGORY_WEIGHTS.get(feature.category, 0)

    if budget == Budget.LOW and feature.effort_level in EXPENSIVE_EFFORTS:
        score -= LOW_BUDGET_PENALTY

    return score


def prioritize_features(
    features: Iterable[FeatureSuggestion],
    focus: str = "all",
    budget: str = "medium",
    max_suggestions: int = 10,
) -> list[FeatureSuggestion]:
    """Rank candidates by priority score and keep the top ``max_suggestions``.

    Ties keep their input order (``sorted`` is stable).
    """
    scored = [
        feature.model_copy(update={"priority_score": score_feature(feature, focus, budget)})
        for feature in features
    ]
    ranked = sorted(scored, key=lambda f: f.priority_score, reverse=True)
    logger.debug("Prioritized %d candidates (focus=%s, budget=%s)", len(ranked), focus, budget)
    return ranked[:max(max_suggestions, 0)]


def calculate_priority(adoption: float, threshold: int = DEFAULT_PRIORITY_THRESHOLD) -> str:
    """Bucket a market-adoption percentage into high / medium / low."""
    if adoption >= threshold:
        return "high"
    elif adoption >= OPPORTUNITY_THRESHOLD:
        return "medium"
    return "low"


def market_readiness(gap_score: float) -> str:
    if gap_score <= 10:
        return "excellent"
    elif gap_score <= 25:
        return "good"
    elif gap_score <= 50:
        return "fair"
    return "needs_improvement"


def compute_gap_score(critical_count: int, opportunity_count: int, total_features: int) -> float:
    """Weighted share of missing features: critical gaps count triple."""
    if total_features <= 0:
        return 0.0
    return (critical_count * 3 + opportunity_count) / total_features * 100


def analyze_gaps(
    missing: list[FeatureCoverage],
    total_features: int,
    priority_threshold: int = DEFAULT_PRIORITY_THRESHOLD,
) -> GapAnalysis:
    """Classify missing market features and score the overall gap.

    Critical gaps meet the priority threshold, opportunity gaps sit between
    40% and the threshold, everything else is nice-to-have.
    """
    analysis = GapAnalysis()

    for feature in missing:
        if feature.market_adoption >= priority_threshold:
            analysis.critical_gaps.append(feature)
        elif feature.market_adoption >= OPPORTUNITY_THRESHOLD:
            analysis.opportunity_gaps.append(feature)
        else:
            analysis.nice_to_have_gaps.append(feature)

    analysis.gap_score = compute_gap_score(
        len(analysis.critical_gaps), len(analysis.opportunity_gaps), total_features
    )
    analysis.market_readiness = market_readiness(analysis.gap_score)
    return analysis


def analyze_competitive_position(
    present: list[FeatureCoverage],
    missing: list[FeatureCoverage],
    unique_features: list[str],
    total_features: int,
) -> CompetitivePosition:
    """Score market coverage, with up to 20 bonus points for unique features."""
    position = CompetitivePosition()

    if total_features > 0:
        coverage = len(present) / total_features * 100
        innovation_bonus = min(len(unique_features) * 5, 20)
        position.competitive_score = min(coverage + innovation_bonus, 100)

    position.strength_areas = [f.feature for f in present if f.market_adoption >= STRENGTH_THRESHOLD]
    position.weakness_areas = [f.feature for f in missing if f.market_adoption >= STRENGTH_THRESHOLD]
    position.differentiation_opportunities = list(unique_features)
    return position
