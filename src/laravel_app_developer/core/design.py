"""Complete system design from a one-line description."""

from __future__ import annotations

import copy
import hashlib
import logging
from typing import Optional

from .catalog import systems

logger = logging.getLogger(__name__)


def infer_system_type(description: str) -> str:
    """First system type with a keyword contained in ``description``, else ``custom``."""
    description = description.lower()
    for system_type, keywords in systems.TYPE_KEYWORDS.items():
        if any(keyword in description for keyword in keywords):
            return system_type
    return "custom"


def _stable_index(seed: str, size: int) -> int:
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % size


def generate_system_name(description: str, system_type: str) -> str:
    """Adjective plus type name, picked by a hash of the description.

    The same description always yields the same name.
    """
    type_names = systems.TYPE_NAMES.get(system_type, systems.TYPE_NAMES["custom"])
    adjective = systems.NAME_ADJECTIVES[_stable_index(description, len(systems.NAME_ADJECTIVES))]
    type_name = type_names[_stable_index(description + "|" + system_type, len(type_names))]
    return f"{adjective} {type_name}"


def generate_value_proposition(system_type: str, complexity: str) -> list[str]:
    return (
        systems.COMPLEXITY_BENEFITS.get(complexity, [])
        + systems.TYPE_BENEFITS.get(system_type, systems.TYPE_BENEFITS["custom"])
    )


def generate_feature_set(
    system_type: str,
    complexity: str,
    must_have: list[str],
    nice_to_have: list[str],
    include_ai: bool,
    mobile_first: bool,
) -> dict:
    base = systems.BASE_FEATURES.get(system_type, systems.DEFAULT_BASE_FEATURES)
    feature_set = {
        "core_features": base["core"] + must_have + nice_to_have,
        "advanced_features": base["advanced"] + systems.COMPLEXITY_FEATURES.get(complexity, []),
        "premium_features": list(base["premium"]),
    }
    if include_ai:
        feature_set["ai_features"] = list(systems.AI_FEATURES.get(system_type, systems.DEFAULT_AI_FEATURES))
    if mobile_first:
        feature_set["mobile_features"] = list(systems.MOBILE_FEATURES)
    return feature_set


def generate_system_architecture(system_type: str, complexity: str) -> dict:
    return {
        "architecture_pattern": systems.ARCHITECTURE_PATTERNS.get(complexity, systems.DEFAULT_ARCHITECTURE_PATTERN),
        "layers": dict(systems.ARCHITECTURE_LAYERS),
        "components": systems.BASE_COMPONENTS + systems.TYPE_COMPONENTS.get(system_type, []),
        "integrations": systems.BASE_INTEGRATIONS + systems.TYPE_INTEGRATIONS.get(system_type, []),
        "scalability_considerations": list(systems.SCALABILITY_CONSIDERATIONS),
    }


def generate_user_experience(system_type: str) -> dict:
    return {
        "design_principles": list(systems.DESIGN_PRINCIPLES),
        "key_user_flows": list(systems.USER_FLOWS.get(system_type, systems.DEFAULT_USER_FLOWS)),
        "ui_components": list(systems.UI_COMPONENTS),
        "accessibility_features": list(systems.ACCESSIBILITY_FEATURES),
    }


def generate_competitive_advantages(complexity: str, include_ai: bool, mobile_first: bool) -> list[str]:
    advantages = list(systems.COMPETITIVE_ADVANTAGES.get(complexity, []))
    if include_ai:
        advantages.append("AI-powered automation and insights")
    if mobile_first:
        advantages.append("Mobile-first design and experience")
    return advantages


def generate_ai_features(system_type: str) -> dict:
    features = {"machine_learning": list(systems.ML_FEATURES.get(system_type, systems.DEFAULT_ML_FEATURES))}
    features.update(copy.deepcopy(systems.AI_CAPABILITIES))
    return features


def generate_market_analysis(system_type: str) -> dict:
    return {
        "market_size": dict(systems.MARKET_SIZES.get(system_type, systems.DEFAULT_MARKET_SIZE)),
        "target_market": copy.deepcopy(systems.TARGET_MARKET),
        "competitive_landscape": copy.deepcopy(
            systems.COMPETITIVE_LANDSCAPES.get(system_type, systems.DEFAULT_COMPETITIVE_LANDSCAPE)
        ),
        "market_opportunities": list(systems.MARKET_OPPORTUNITIES),
    }


def design_complete_system(
    description: str,
    system_type: str,
    complexity: str = "standard",
    must_have_features: Optional[list[str]] = None,
    nice_to_have_features: Optional[list[str]] = None,
    business_model: str = "saas",
    include_ai: bool = False,
    mobile_first: bool = True,
    tech_preference: str = "laravel",
) -> dict:
    stack = systems.TECHNOLOGY_STACKS.get(tech_preference, systems.TECHNOLOGY_STACKS[systems.DEFAULT_TECH_PREFERENCE])
    monetization = systems.MONETIZATION_STRATEGIES.get(
        business_model, systems.MONETIZATION_STRATEGIES[systems.DEFAULT_BUSINESS_MODEL]
    )

    design = {
        "name": generate_system_name(description, system_type),
        "vision": systems.VISIONS.get(system_type, systems.VISIONS["custom"]),
        "core_value_proposition": generate_value_proposition(system_type, complexity),
        "user_personas": copy.deepcopy(systems.PERSONAS.get(system_type, systems.DEFAULT_PERSONAS)),
        "feature_set": generate_feature_set(
            system_type, complexity, must_have_features or [], nice_to_have_features or [], include_ai, mobile_first
        ),
        "system_architecture": generate_system_architecture(system_type, complexity),
        "technology_stack": copy.deepcopy(stack),
        "data_model": copy.deepcopy({**systems.BASE_ENTITIES, **systems.TYPE_ENTITIES.get(system_type, {})}),
        "user_experience": generate_user_experience(system_type),
        "security_framework": copy.deepcopy(systems.SECURITY_FRAMEWORK),
        "scalability_plan": copy.deepcopy(systems.SCALABILITY_PLAN),
        "monetization_strategy": copy.deepcopy(monetization),
        "competitive_advantages": generate_competitive_advantages(complexity, include_ai, mobile_first),
    }
    if include_ai:
        design["ai_features"] = generate_ai_features(system_type)
    return design


def design_system(
    system_description: str,
    system_type: Optional[str] = None,
    target_users: Optional[str] = None,
    complexity_level: str = "standard",
    must_have_features: Optional[list[str]] = None,
    nice_to_have_features: Optional[list[str]] = None,
    business_model: str = "saas",
    include_ai_features: bool = False,
    mobile_first: bool = True,
    tech_preference: str = "laravel",
    designed_at: Optional[str] = None,
) -> dict:
    """Full design-system payload."""
    system_type = system_type or infer_system_type(system_description)
    target_users = target_users or "general users"

    design = design_complete_system(
        description=system_description,
        system_type=system_type,
        complexity=complexity_level,
        must_have_features=must_have_features,
        nice_to_have_features=nice_to_have_features,
        business_model=business_model,
        include_ai=include_ai_features,
        mobile_first=mobile_first,
        tech_preference=tech_preference,
    )
    logger.info("Designed %s (%s, %s)", design["name"], system_type, complexity_level)

    return {
        "system_overview": {
            "name": design["name"],
            "type": system_type,
            "description": system_description,
            "complexity": complexity_level,
            "target_users": target_users,
            "design_timestamp": designed_at,
        },
        "system_design": design,
        "implementation_roadmap": copy.deepcopy(systems.IMPLEMENTATION_ROADMAP),
        "market_analysis": generate_market_analysis(system_type),
        "business_case": copy.deepcopy(systems.BUSINESS_CASE),
        "next_steps": copy.deepcopy(systems.NEXT_STEPS),
    }
