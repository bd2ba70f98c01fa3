"""Laravel App Developer MCP App Server.

FastMCP server with 7 tools and an MCP Apps interactive UI.
Run: laravel-app-developer-mcp
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import AsyncIterator, Callable, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from . import get_app_html
from .config import Settings, get_settings
from .core import analysis, comparison, design, markdown, planning, research, suggestions
from .core.catalog.market_leaders import MARKET_LEADERS
from .storage import DEFAULT_PLAN_FILE, save_plan

logger = logging.getLogger(__name__)

MCP_APP_MIME = "text/html;profile=mcp-app"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)
WRITES_FILE = ToolAnnotations(readOnlyHint=False, destructiveHint=False, idempotentHint=True, openWorldHint=False)

INSTRUCTIONS = (
    "Research market leaders, compare your Laravel application's features against them, "
    "get prioritized feature suggestions, and generate AI-ready development plans."
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _failure(action: str, exc: Exception) -> dict:
    logger.error("Failed to %s: %s", action, exc, exc_info=True)
    return {"error": f"Failed to {action}: {exc}"}


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging for the server process."""
    logging.basicConfig(level=get_settings().log_level, format=LOG_FORMAT)
    logger.info("Laravel App Developer server starting")
    try:
        yield
    finally:
        logger.info("Laravel App Developer server stopped")


# ─── MCP Apps UI Resource ─────────────────────────────────────────────────────

APP_RESOURCE_URI = "ui://app-developer/app"


def app_ui() -> str:
    """Laravel App Developer overview and tool catalog."""
    return get_app_html()


# ─── Tool 1: Analyze Application ─────────────────────────────────────────────


async def analyze_application(
    include_code_samples: bool = False,
    deep_analysis: bool = False,
    focus_area: str = "all",
) -> dict:
    """Analyze the Laravel application to inventory its models, controllers, routes, views,
    middleware, jobs, events, policies, commands, migrations and packages.

    Args:
        include_code_samples: Include the first lines of each file in the output.
        deep_analysis: Also list public methods, controller actions and traits.
        focus_area: all, models, controllers, routes, views, middleware, jobs, events, policies or commands.
    """
    try:
        settings = get_settings()
        scanner = analysis.LaravelProjectScanner(
            settings.project_root,
            scan_directories=settings.scan_directories,
            ignore_patterns=settings.ignore_patterns,
            enabled_kinds=settings.extract_features,
        )
        return analysis.analyze_application(scanner, include_code_samples, deep_analysis, focus_area, analyzed_at=_now())
    except Exception as e:
        return _failure("analyze application", e)


# ─── Tool 2: Research Market Leaders ─────────────────────────────────────────


async def research_market_leaders(
    category: str,
    limit: int = 10,
    focus_area: str = "all",
    include_startups: bool = False,
    market_segment: str = "all",
) -> dict:
    """Research the market leaders of an application category and analyze their features,
    pricing models and technologies.

    Args:
        category: Application category, e.g. 'crm', 'e-commerce', 'project management'.
        limit: Maximum number of competitors (default 10, max 20).
        focus_area: features, pricing, technology, user_experience or all.
        include_startups: Include companies founded in 2020 or later.
        market_segment: enterprise, sme, consumer or all.
    """
    try:
        settings = get_settings()
        if not settings.market_research_enabled:
            raise RuntimeError("market research is disabled")
        return research.research_market_leaders(
            category,
            limit=limit,
            focus_area=focus_area,
            include_startups=include_startups,
            market_segment=market_segment,
            max_competitors=settings.max_competitors,
            researched_at=_now(),
        )
    except Exception as e:
        return _failure("research market leaders", e)


# ─── Tool 3: Compare Features ────────────────────────────────────────────────


async def compare_features(
    category: str,
    current_features: Optional[list[str]] = None,
    market_leaders_data: Optional[dict] = None,
    comparison_focus: str = "comprehensive",
    priority_threshold: int = 70,
) -> dict:
    """Compare your application's features with market leaders: feature gaps, competitive
    position and an action plan.

    Args:
        category: Application category, e.g. 'crm'.
        current_features: Features your application already has (from analyze-application).
        market_leaders_data: Output of research-market-leaders. Curated data is used when omitted.
        comparison_focus: features, technology, user_experience, pricing or comprehensive.
        priority_threshold: Market adoption % at which a missing feature is critical (default 70).
    """
    try:
        settings = get_settings()
        if not market_leaders_data:
            if settings.market_research_enabled:
                market_leaders_data = research.research_market_leaders(category, max_competitors=settings.max_competitors)
            else:
                market_leaders_data = {"market_leaders": []}
        return comparison.compare_features(
            category,
            current_features=current_features,
            market_leaders_data=market_leaders_data,
            comparison_focus=comparison_focus,
            priority_threshold=priority_threshold,
            compared_at=_now(),
        )
    except Exception as e:
        return _failure("compare features", e)


# ─── Tool 4: Suggest Features ────────────────────────────────────────────────


async def suggest_features(
    app_category: str,
    current_features: Optional[list[str]] = None,
    target_users: Optional[list[str]] = None,
    business_stage: str = "growth",
    suggestion_focus: str = "all",
    include_emerging_trends: bool = True,
    max_suggestions: int = 10,
    budget_consideration: str = "medium",
    development_timeline: str = "no_preference",
) -> dict:
    """Suggest new features ranked by importance, impact, effort and category, with an
    implementation roadmap.

    Args:
        app_category: Application category, e.g. 'crm', 'e-commerce', 'project-management'.
        current_features: Features your application already has.
        target_users: Target user types or personas.
        business_stage: startup, growth, mature or enterprise.
        suggestion_focus: essential, competitive, user_experience, revenue_growth, innovation, emerging_trends or all.
        include_emerging_trends: Include emerging technology trend features.
        max_suggestions: Maximum number of prioritized suggestions (default 10).
        budget_consideration: low, medium, high or unlimited. Low budgets penalize high-effort features.
        development_timeline: immediate, short_term, long_term or no_preference.
    """
    try:
        return suggestions.suggest_features(
            app_category,
            current_features=current_features,
            target_users=target_users,
            business_stage=business_stage,
            suggestion_focus=suggestion_focus,
            include_emerging_trends=include_emerging_trends,
            max_suggestions=max_suggestions,
            budget_consideration=budget_consideration,
            development_timeline=development_timeline,
            generated_at=_now(),
        )
    except Exception as e:
        return _failure("generate feature suggestions", e)


# ─── Tool 5: Generate Development Plan ───────────────────────────────────────


async def generate_development_plan(
    project_name: str,
    description: str,
    project_type: str = "web_application",
    features: Optional[list[str]] = None,
    tech_stack: str = "Laravel, Vue.js, MySQL",
    timeline: str = "quarter",
    complexity: str = "medium",
    include_testing: bool = True,
    include_deployment: bool = True,
    target_audience: str = "general users",
    output_file: str = DEFAULT_PLAN_FILE,
) -> dict:
    """Write a DEVELOPMENT_PLAN.md optimized for AI assistants: phases, numbered tasks with
    acceptance criteria, timeline, team and risks.

    Args:
        project_name: Name of the project.
        description: What the application should do.
        project_type: web_application, mobile_app, api, full_stack, microservice or custom.
        features: Features to plan for; each gets a backend and a frontend task.
        tech_stack: Comma-separated technologies.
        timeline: sprint, month, quarter or a custom duration.
        complexity: simple, medium, complex or enterprise.
        include_testing: Add the testing phase and strategy.
        include_deployment: Add the deployment phase and strategy.
        target_audience: Who the application is for.
        output_file: File name inside the plans directory (default DEVELOPMENT_PLAN.md).
    """
    try:
        settings = get_settings()
        plan = planning.build_plan(
            project_name,
            description,
            project_type=project_type,
            features=features,
            tech_stack=tech_stack,
            timeline=timeline,
            complexity=complexity,
            include_testing=include_testing,
            include_deployment=include_deployment,
            target_audience=target_audience,
            created_at=_now(),
        )
        content = markdown.render_plan(plan, settings.render_options())
        path = save_plan(content, settings.output_directory, output_file)
        return {
            "success": True,
            "file_path": str(path),
            "plan_summary": planning.plan_summary(plan),
            "plan_structure": planning.plan_structure(plan),
            "ai_instructions": dict(planning.AI_INSTRUCTIONS),
        }
    except Exception as e:
        return _failure("generate development plan", e)


# ─── Tool 6: Design System ───────────────────────────────────────────────────


async def design_system(
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
) -> dict:
    """Design a complete software system from a high-level description, e.g. "best CRM in the world".

    Args:
        system_description: What to build.
        system_type: crm, e-commerce, project-management, social-media, fintech, healthcare,
                     education or custom. Inferred from the description when omitted.
        target_users: Primary users or audience.
        complexity_level: startup-mvp, standard, enterprise or industry-leading.
        must_have_features: Features that must be included.
        nice_to_have_features: Features that would be good to include.
        business_model: saas, marketplace, freemium or custom.
        include_ai_features: Add AI and machine learning features.
        mobile_first: Design with a mobile-first approach.
        tech_preference: laravel or node.
    """
    try:
        return design.design_system(
            system_description,
            system_type=system_type,
            target_users=target_users,
            complexity_level=complexity_level,
            must_have_features=must_have_features,
            nice_to_have_features=nice_to_have_features,
            business_model=business_model,
            include_ai_features=include_ai_features,
            mobile_first=mobile_first,
            tech_preference=tech_preference,
            designed_at=_now(),
        )
    except Exception as e:
        return _failure("design system", e)


# ─── Tool 7: Open MCP App (Interactive UI) ──────────────────────────────────


async def open_app_developer() -> dict:
    """Open the Laravel App Developer app: configured project, plans directory and tool catalog."""
    settings = get_settings()
    enabled = [entry.name for entry in TOOLS if entry.name not in settings.tools_exclude]
    categories = sorted(MARKET_LEADERS)
    return {
        "title": "Laravel App Developer",
        "project_root": str(settings.project_root),
        "output_directory": str(settings.output_directory),
        "market_categories": categories,
        "market_research_enabled": settings.market_research_enabled,
        "tools": enabled,
        "summary": f"{len(enabled)} tools enabled. Curated market data for {', '.join(categories)}.",
    }


# ─── Registry ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ToolEntry:
    name: str
    fn: Callable
    annotations: ToolAnnotations
    meta: Optional[dict] = None


TOOLS = [
    ToolEntry("analyze-application", analyze_application, READ_ONLY),
    ToolEntry("research-market-leaders", research_market_leaders, READ_ONLY),
    ToolEntry("compare-features", compare_features, READ_ONLY),
    ToolEntry("suggest-features", suggest_features, READ_ONLY),
    ToolEntry("generate-development-plan", generate_development_plan, WRITES_FILE),
    ToolEntry("design-system", design_system, READ_ONLY),
    ToolEntry("open-app-developer", open_app_developer, READ_ONLY, meta={"ui": {"resourceUri": APP_RESOURCE_URI}}),
]


def create_server(settings: Optional[Settings] = None) -> FastMCP:
    """Build the FastMCP server, registering every tool not excluded by configuration."""
    settings = settings or get_settings()
    server = FastMCP("Laravel App Developer", instructions=INSTRUCTIONS, lifespan=lifespan)
    server.resource(APP_RESOURCE_URI, mime_type=MCP_APP_MIME)(app_ui)

    for entry in TOOLS:
        if entry.name in settings.tools_exclude:
            logger.info("Tool %s excluded by configuration", entry.name)
            continue
        server.add_tool(entry.fn, name=entry.name, annotations=entry.annotations, meta=entry.meta)
    return server


def main():
    """Entry point for the CLI command."""
    create_server().run()


if __name__ == "__main__":
    main()
