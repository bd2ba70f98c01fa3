"""Laravel App Developer CLI."""

import json

import click
from rich.console import Console
from rich.table import Table

from .config import Settings

console = Console()

CLIENT_CONFIG_FILE = ".mcp.json"
SERVER_KEY = "laravel-app-developer"

TOOL_DESCRIPTIONS = [
    ("analyze-application", "Analyze your Laravel app structure and features"),
    ("research-market-leaders", "Research top competitors in your app category"),
    ("compare-features", "Compare your features with market leaders"),
    ("generate-development-plan", "Create comprehensive development plans"),
    ("design-system", "Design complete systems from requirements"),
    ("suggest-features", "Get feature suggestions based on market analysis"),
]

EXAMPLE_PROMPTS = [
    "Analyze my Laravel application and tell me what features it has",
    "Research the top 10 CRM applications and compare them with my app",
    "Generate a development plan for building a modern e-commerce platform",
    "Design the best project management system and create a development roadmap",
]


def client_config(settings: Settings) -> dict:
    """MCP client configuration that launches this server for the configured project."""
    return {
        "mcpServers": {
            SERVER_KEY: {
                "command": "laravel-app-developer-mcp",
                "env": {"LARAVEL_PROJECT_ROOT": str(settings.project_root)},
            }
        }
    }


@click.group()
def main():
    """Laravel App Developer - market research and development plans for Laravel apps."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"laravel-app-developer v{__version__}")


@main.command()
def serve():
    """Start the MCP server over stdio."""
    from .server import create_server

    create_server().run()


@main.command()
@click.option("--force", is_flag=True, help="Overwrite an existing client configuration")
def install(force: bool):
    """Write the MCP client configuration and create the development plans directory."""
    settings = Settings.from_env()
    console.print("[blue]Installing Laravel App Developer MCP Server...[/blue]")

    config = client_config(settings)
    config_path = settings.project_root / CLIENT_CONFIG_FILE
    if not config_path.exists() or force:
        config_path.write_text(json.dumps(config, indent=4) + "\n", encoding="utf-8")
        console.print(f"Client configuration written: {config_path}")
    else:
        console.print(f"[yellow]{config_path} already exists. Use --force to overwrite.[/yellow]")

    if not settings.output_directory.exists():
        settings.output_directory.mkdir(parents=True)
        console.print(f"Created development plans directory: {settings.output_directory}")

    console.print("\n[bold]Next steps[/bold]")
    console.print("1. Add the MCP server to your AI assistant configuration:")
    console.print_json(data=config)

    console.print("2. Available tools:")
    table = Table()
    table.add_column("Tool", style="cyan")
    table.add_column("Description")
    for name, description in TOOL_DESCRIPTIONS:
        table.add_row(name, description)
    console.print(table)

    console.print("3. Try these with your AI assistant:")
    for prompt in EXAMPLE_PROMPTS:
        console.print(f"   • \"{prompt}\"")

    console.print("[green]Laravel App Developer MCP Server installed successfully![/green]")
