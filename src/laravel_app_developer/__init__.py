"""Laravel App Developer MCP Server.

Research market leaders, find feature gaps, and turn the result into an
AI-ready development plan for a Laravel application.
"""

__version__ = "1.0.0"

from .app_definition import LaravelAppDeveloperApp


def get_app_html() -> str:
    """Return the MCP App HTML content. Re-renders each call for hot reload."""
    return LaravelAppDeveloperApp().render()
