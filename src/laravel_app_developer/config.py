"""Server configuration, read from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

from .core.analysis import COMPONENT_KINDS, DEFAULT_IGNORE_PATTERNS, DEFAULT_SCAN_DIRECTORIES
from .core.markdown import RenderOptions

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _parse_int(name: str, value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_list(value: Optional[str], default: list[str]) -> list[str]:
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    project_root: Path = Field(description="Root of the Laravel application to analyze")
    output_directory: Path = Field(description="Where development plans are written")
    template_style: Literal["detailed", "compact"] = "detailed"
    include_estimates: bool = True
    include_dependencies: bool = True
    scan_directories: list[str] = Field(default_factory=lambda: list(DEFAULT_SCAN_DIRECTORIES))
    ignore_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))
    extract_features: list[str] = Field(default_factory=lambda: list(COMPONENT_KINDS))
    market_research_enabled: bool = True
    max_competitors: int = Field(default=10, ge=1)
    tools_exclude: list[str] = Field(default_factory=list)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        project_root = Path(env.get("LARAVEL_PROJECT_ROOT") or os.getcwd())
        output_directory = env.get("DEVELOPMENT_PLANS_DIR")
        disabled = set(_parse_list(env.get("ANALYSIS_DISABLED_FEATURES"), []))

        return cls(
            project_root=project_root,
            output_directory=Path(output_directory) if output_directory else project_root / "development-plans",
            template_style=(env.get("PLAN_TEMPLATE_STYLE") or "detailed").strip().lower(),
            include_estimates=_parse_bool("PLAN_INCLUDE_ESTIMATES", env.get("PLAN_INCLUDE_ESTIMATES"), True),
            include_dependencies=_parse_bool("PLAN_INCLUDE_DEPENDENCIES", env.get("PLAN_INCLUDE_DEPENDENCIES"), True),
            scan_directories=_parse_list(env.get("ANALYSIS_SCAN_DIRECTORIES"), DEFAULT_SCAN_DIRECTORIES),
            ignore_patterns=_parse_list(env.get("ANALYSIS_IGNORE_PATTERNS"), DEFAULT_IGNORE_PATTERNS),
            extract_features=[kind for kind in COMPONENT_KINDS if kind not in disabled],
            market_research_enabled=_parse_bool("MARKET_RESEARCH_ENABLED", env.get("MARKET_RESEARCH_ENABLED"), True),
            max_competitors=_parse_int("MARKET_MAX_COMPETITORS", env.get("MARKET_MAX_COMPETITORS"), 10),
            tools_exclude=_parse_list(env.get("MCP_TOOLS_EXCLUDE"), []),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            template_style=self.template_style,
            include_estimates=self.include_estimates,
            include_dependencies=self.include_dependencies,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, loaded once from the environment."""
    return Settings.from_env()
