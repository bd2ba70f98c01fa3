"""Laravel App Developer MCP App: pure Python config, no custom JS/CSS."""

from mcpbundles_app_ui import App, Card, DarkTheme


class LaravelAppDeveloperApp(App):
    """Overview dashboard plus the tool catalog."""

    name = "Laravel App Developer"
    subtitle = "Market research, feature gaps and AI-ready development plans"
    theme = DarkTheme(
        accent="#f05340",
        bg_page="#18181b",
        bg_card="#27272a",
        bg_hover="#323238",
        text_primary="#fafafa",
        text_secondary="#e4e4e7",
        text_muted="#a1a1aa",
        border="#3f3f46",
        success="#22c55e",
        warning="#eab308",
        error="#ef4444",
        chart_colors=[
            "#f05340", "#22c55e", "#eab308", "#3b82f6",
            "#a855f7", "#06b6d4", "#f97316", "#ec4899",
        ],
    )

    layout = [Card(title="")]

    tool_name = "open-app-developer"
    tabs = [
        {"id": "overview", "label": "Overview", "tool": "open-app-developer", "type": "dashboard"},
        {"id": "tools", "label": "Tools", "tool": None, "type": "tools"},
    ]
    footer_text = "Curated market data · Laravel project analysis · Markdown plans"

    tool_catalog_intro = (
        "This server provides <strong>7 tools</strong> your AI can call directly. "
        "Market research and feature suggestions work from a curated catalog for "
        "<code>crm</code>, <code>e-commerce</code> and <code>project management</code>. "
        "<strong>generate-development-plan</strong> is the only tool that writes to disk."
    )
    tool_catalog = [
        {"name": "open-app-developer", "label": "Open App Developer", "icon": "\U0001f6e0️", "desc": "Opens this app with the configured project, output directory and supported categories.", "usage": "No arguments needed."},
        {"name": "analyze-application", "label": "Analyze Application", "icon": "\U0001f50e", "desc": "Inventory of models, controllers, routes, views, jobs, events, policies, commands, migrations and packages.", "usage": 'analyze-application(focus_area="all", deep_analysis=false)', "source": "Laravel project"},
        {"name": "research-market-leaders", "label": "Market Leaders", "icon": "\U0001f3c6", "desc": "Top companies in a category with common features, pricing models and technology trends.", "usage": 'research-market-leaders(category="crm", limit=5)', "source": "Curated catalog"},
        {"name": "compare-features", "label": "Compare Features", "icon": "⚖️", "desc": "Gap analysis of your features against market leaders, with a competitive score and action plan.", "usage": 'compare-features(category="crm", current_features=["contact management"])', "source": "Curated catalog"},
        {"name": "suggest-features", "label": "Suggest Features", "icon": "\U0001f4a1", "desc": "Prioritized feature suggestions and an implementation roadmap.", "usage": 'suggest-features(app_category="e-commerce", suggestion_focus="revenue_growth")'},
        {"name": "generate-development-plan", "label": "Development Plan", "icon": "\U0001f4dd", "desc": "Writes an AI-optimized DEVELOPMENT_PLAN.md with phases, tasks and acceptance criteria.", "usage": 'generate-development-plan(project_name="Shop", description="...", features=["login"])', "source": "Writes markdown"},
        {"name": "design-system", "label": "Design System", "icon": "\U0001f3d7️", "desc": "Complete system design from a one-line description: features, architecture, stack, monetization.", "usage": 'design-system(system_description="best CRM in the world")'},
    ]
