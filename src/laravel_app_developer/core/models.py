"""Pydantic data models: the shared business objects.

The FastMCP server and the core logic use these models as the common
interface for scoring and comparison.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Importance(str, Enum):
    """How important a suggested feature is to the product."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Impact(str, Enum):
    """Expected user/business impact of a feature."""

    LOW = "low"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"
    VERY_HIGH = "very_high"


class EffortLevel(str, Enum):
    """Development effort needed to ship a feature."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class FeatureCategory(str, Enum):
    """Pool a suggested feature was drawn from."""

    ESSENTIAL = "essential"
    COMPETITIVE = "competitive"
    USER_EXPERIENCE = "user_experience"
    REVENUE_GROWTH = "revenue_growth"
    INNOVATION = "innovation"
    EMERGING_TRENDS = "emerging_trends"


class Budget(str, Enum):
    """Caller budget consideration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNLIMITED = "unlimited"


class Complexity(str, Enum):
    """Project complexity for development plans."""

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"
    ENTERPRISE = "enterprise"


class FeatureSuggestion(BaseModel):
    """A candidate feature considered by the prioritization scorer.

    The enum-like fields are plain strings on purpose: values outside the
    known vocabularies must reach the scorer intact and weigh 0 there.
    """

    name: str
    description: str
    importance: str = Field(description="low / medium / high / critical")
    category: str = Field(description="Pool the suggestion came from")
    effort_level: str = Field(description="low / medium / high / very_high")
    impact: str = Field(description="low / medium / medium-high / high / very_high")
    rationale: str = ""
    trend: Optional[str] = None
    priority_score: Optional[int] = None


class MarketLeader(BaseModel):
    """Curated profile of a competitor product."""

    name: str
    website: str = ""
    valuation: float = 0
    founded_year: int = 2025
    employees: int = 0
    users: int = 0
    market_segments: list[str] = Field(default_factory=lambda: ["all"])
    pricing_model: str = ""
    key_features: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class FeatureCoverage(BaseModel):
    """A market feature tagged with how widely competitors ship it."""

    feature: str
    market_adoption: float = Field(ge=0.0, le=100.0, description="Percent of leaders with the feature")
    competitor_count: int
    priority: str = Field(description="high / medium / low relative to the priority threshold")


class GapAnalysis(BaseModel):
    """Missing market features bucketed by adoption."""

    critical_gaps: list[FeatureCoverage] = Field(default_factory=list)
    opportunity_gaps: list[FeatureCoverage] = Field(default_factory=list)
    nice_to_have_gaps: list[FeatureCoverage] = Field(default_factory=list)
    gap_score: float = Field(0.0, description="Lower is better")
    market_readiness: str = "unknown"


class CompetitivePosition(BaseModel):
    """Strengths and weaknesses relative to market leaders."""

    strength_areas: list[str] = Field(default_factory=list)
    weakness_areas: list[str] = Field(default_factory=list)
    differentiation_opportunities: list[str] = Field(default_factory=list)
    competitive_score: float = 0.0
