"""Laravel project scanner.

Walks a Laravel application by convention (app/Models, app/Http/Controllers,
routes/*.php, resources/views, ...) and builds a component inventory. Everything
is read from source text; nothing in the scanned project is executed.
"""

from __future__ import annotations

import fnmatch
import json
import logging
import platform
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

DEFAULT_SCAN_DIRECTORIES = ["app", "resources/views", "routes", "database/migrations", "config"]
DEFAULT_IGNORE_PATTERNS = ["*/vendor/*", "*/node_modules/*", "*/storage/*", "*/.git/*"]

FOCUS_AREAS = ("all", "models", "controllers", "routes", "views", "middleware", "jobs", "events", "policies", "commands")
COMPONENT_KINDS = FOCUS_AREAS[1:] + ("migrations", "config", "packages")

MAGIC_METHODS = {"__construct", "__call", "__callStatic"}

HIGH_COMPLEXITY_COMPONENTS = 100
MEDIUM_COMPLEXITY_COMPONENTS = 50


@dataclass(frozen=True)
class ComponentKind:
    key: str
    path: str
    pattern: str = "*.php"
    sample_lines: int = 30


MODELS = ComponentKind("models", "app/Models", sample_lines=50)
CONTROLLERS = ComponentKind("controllers", "app/Http/Controllers", sample_lines=50)
VIEWS = ComponentKind("views", "resources/views", pattern="*.blade.php")
MIDDLEWARE = ComponentKind("middleware", "app/Http/Middleware")
JOBS = ComponentKind("jobs", "app/Jobs")
EVENTS = ComponentKind("events", "app/Events")
POLICIES = ComponentKind("policies", "app/Policies")
COMMANDS = ComponentKind("commands", "app/Console/Commands")
MIGRATIONS = ComponentKind("migrations", "database/migrations")
CONFIG = ComponentKind("config_files", "config")

ROUTE_PATTERN = re.compile(
    r"Route::(?P<verb>get|post|put|patch|delete|options|any|match|resource|apiResource)\s*\(\s*"
    r"(?:\[[^\]]*\]\s*,\s*)?['\"](?P<uri>[^'\"]*)['\"]",
    re.IGNORECASE,
)
ROUTE_NAME_PATTERN = re.compile(r"->name\(\s*['\"]([^'\"]+)['\"]\s*\)")
ROUTE_MIDDLEWARE_PATTERN = re.compile(r"->middleware\(([^)]*)\)")
ACTION_ARRAY_PATTERN = re.compile(r"\[\s*([\w\\]+)::class\s*,\s*['\"](\w+)['\"]\s*\]")
ACTION_CLASS_PATTERN = re.compile(r"([\w\\]+)::class")
ACTION_STRING_PATTERN = re.compile(r"['\"]([\w\\]+@\w+)['\"]")
QUOTED_PATTERN = re.compile(r"['\"]([^'\"]+)['\"]")

PUBLIC_METHOD_PATTERN = re.compile(r"public\s+(?:static\s+)?function\s+(\w+)\s*\(")
CLASS_PATTERN = re.compile(r"^\s*(?:abstract\s+|final\s+)?class\s+\w+", re.MULTILINE)
TRAIT_USE_PATTERN = re.compile(r"^\s*use\s+([\w\\,\s]+?)\s*[;{]", re.MULTILINE)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def extract_code_sample(content: str, lines: int = 20) -> str:
    return "\n".join(content.split("\n")[:lines])


def public_methods(source: str) -> list[str]:
    return PUBLIC_METHOD_PATTERN.findall(source)


def class_traits(source: str) -> list[str]:
    """Traits pulled in with ``use`` inside the class body (not namespace imports)."""
    match = CLASS_PATTERN.search(source)
    if not match:
        return []
    body = source[match.end():]
    traits = []
    for group in TRAIT_USE_PATTERN.findall(body):
        traits.extend(name.strip() for name in group.split(",") if name.strip())
    return traits


def _route_action(statement: str) -> str:
    match = ACTION_ARRAY_PATTERN.search(statement)
    if match:
        return f"{match.group(1)}@{match.group(2)}"
    match = ACTION_STRING_PATTERN.search(statement)
    if match:
        return match.group(1)
    match = ACTION_CLASS_PATTERN.search(statement)
    if match:
        return match.group(1)
    return "Closure"


def parse_routes(source: str, file_name: str = "") -> list[dict]:
    """Route declarations found in a routes/*.php file.

    Each ``Route::<verb>('uri', ...)`` call up to the terminating ``;`` is
    one route; ``->name()`` and ``->middleware()`` chained onto it are kept.
    """
    routes = []
    for match in ROUTE_PATTERN.finditer(source):
        end = source.find(";", match.end())
        statement = source[match.start(): end if end != -1 else len(source)]

        middleware = []
        for args in ROUTE_MIDDLEWARE_PATTERN.findall(statement):
            middleware.extend(QUOTED_PATTERN.findall(args))

        name = ROUTE_NAME_PATTERN.search(statement)
        routes.append({
            "method": match.group("verb").upper(),
            "uri": match.group("uri"),
            "name": name.group(1) if name else None,
            "action": _route_action(statement[match.end() - match.start():]),
            "middleware": middleware,
            "file": file_name,
        })
    return routes


class LaravelProjectScanner:
    """Scans one Laravel project root."""

    def __init__(
        self,
        root: Path,
        scan_directories: Optional[Iterable[str]] = None,
        ignore_patterns: Optional[Iterable[str]] = None,
        enabled_kinds: Optional[Iterable[str]] = None,
    ):
        self.root = Path(root)
        self.scan_directories = [d.strip("/") for d in (scan_directories or DEFAULT_SCAN_DIRECTORIES)]
        self.ignore_patterns = list(DEFAULT_IGNORE_PATTERNS if ignore_patterns is None else ignore_patterns)
        self.enabled_kinds = set(enabled_kinds) if enabled_kinds is not None else None

    def is_enabled(self, key: str) -> bool:
        return self.enabled_kinds is None or key in self.enabled_kinds

    def is_scanned(self, relative: str) -> bool:
        return any(relative == d or relative.startswith(d + "/") for d in self.scan_directories)

    def is_ignored(self, path: Path) -> bool:
        """Match ignore patterns against the path below the project root."""
        posix = "/" + path.relative_to(self.root).as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.ignore_patterns)

    def _files(self, kind: ComponentKind) -> Optional[list[Path]]:
        """Matching files under the kind's directory, or None when it is not there."""
        base = self.root / kind.path
        if not self.is_scanned(kind.path) or not base.is_dir():
            return None
        return [p for p in sorted(base.rglob(kind.pattern)) if p.is_file() and not self.is_ignored(p)]

    def _collect(self, kind: ComponentKind, include_code_samples: bool, describe) -> dict:
        files = self._files(kind)
        if files is None:
            return {"count": 0, kind.key: []}

        base = self.root / kind.path
        items = []
        for path in files:
            info = describe(path, path.relative_to(base).as_posix())
            if include_code_samples:
                info["code_sample"] = extract_code_sample(_read_text(path), kind.sample_lines)
            items.append(info)
        return {"count": len(items), kind.key: items}

    @staticmethod
    def _class_name(path: Path) -> str:
        return path.name[: -len(".php")] if path.name.endswith(".php") else path.stem

    def analyze_models(self, include_code_samples: bool = False, deep_analysis: bool = False) -> dict:
        def describe(path: Path, relative: str) -> dict:
            name = self._class_name(path)
            info = {"name": name, "file_path": relative, "namespace": f"App\\Models\\{name}"}
            if deep_analysis:
                source = _read_text(path)
                info["methods"] = public_methods(source)
                info["traits"] = class_traits(source)
            return info

        return self._collect(MODELS, include_code_samples, describe)

    def analyze_controllers(self, include_code_samples: bool = False, deep_analysis: bool = False) -> dict:
        def describe(path: Path, relative: str) -> dict:
            name = self._class_name(path)
            parent = Path(relative).parent.as_posix()
            namespace = "App\\Http\\Controllers"
            if parent != ".":
                namespace += "\\" + parent.replace("/", "\\")
            info = {"name": name, "file_path": relative, "namespace": f"{namespace}\\{name}"}
            if deep_analysis:
                info["actions"] = [m for m in public_methods(_read_text(path)) if m not in MAGIC_METHODS]
            return info

        return self._collect(CONTROLLERS, include_code_samples, describe)

    def analyze_routes(self) -> dict:
        routes_dir = self.root / "routes"
        if not self.is_scanned("routes") or not routes_dir.is_dir():
            return {"count": 0, "routes": []}

        routes = []
        for path in sorted(routes_dir.glob("*.php")):
            if self.is_ignored(path):
                continue
            routes.extend(parse_routes(_read_text(path), path.name))
        return {"count": len(routes), "routes": routes}

    def analyze_views(self, include_code_samples: bool = False) -> dict:
        def describe(path: Path, relative: str) -> dict:
            return {"name": relative, "file_path": relative, "size": path.stat().st_size}

        return self._collect(VIEWS, include_code_samples, describe)

    def analyze_simple(self, kind: ComponentKind, include_code_samples: bool = False) -> dict:
        def describe(path: Path, relative: str) -> dict:
            return {"name": self._class_name(path), "file_path": relative}

        return self._collect(kind, include_code_samples, describe)

    def analyze_migrations(self, include_code_samples: bool = False) -> dict:
        def describe(path: Path, relative: str) -> dict:
            modified = datetime.fromtimestamp(path.stat().st_mtime)
            return {
                "name": path.name,
                "file_path": relative,
                "created_at": modified.strftime("%Y-%m-%d %H:%M:%S"),
            }

        return self._collect(MIGRATIONS, include_code_samples, describe)

    def analyze_configuration(self) -> dict:
        return self.analyze_simple(CONFIG)

    def read_composer(self) -> Optional[dict]:
        path = self.root / "composer.json"
        if not path.is_file():
            return None
        return json.loads(_read_text(path))

    def analyze_packages(self) -> dict:
        composer = self.read_composer()
        if composer is None:
            return {"error": "composer.json not found"}
        require = composer.get("require") or {}
        require_dev = composer.get("require-dev") or {}
        return {
            "require": require,
            "require_dev": require_dev,
            "total_packages": len(require) + len(require_dev),
        }

    def laravel_version(self) -> Optional[str]:
        """Installed laravel/framework version from composer.lock, else the composer.json constraint."""
        lock = self.root / "composer.lock"
        if lock.is_file():
            data = json.loads(_read_text(lock))
            for package in data.get("packages", []):
                if package.get("name") == "laravel/framework":
                    return package.get("version")
        composer = self.read_composer() or {}
        return (composer.get("require") or {}).get("laravel/framework")

    def application_info(self, analyzed_at: Optional[str] = None) -> dict:
        env_path = self.root / ".env"
        env = dotenv_values(env_path) if env_path.is_file() else {}
        composer = self.read_composer() or {}
        return {
            "name": env.get("APP_NAME") or composer.get("name") or "Laravel Application",
            "environment": env.get("APP_ENV"),
            "laravel_version": self.laravel_version(),
            "python_version": platform.python_version(),
            "analysis_timestamp": analyzed_at,
        }

    def analyze(self, include_code_samples: bool = False, deep_analysis: bool = False, focus_area: str = "all") -> dict:
        def wanted(key: str) -> bool:
            return focus_area in ("all", key) and self.is_enabled(key)

        analysis = {}
        if wanted("models"):
            analysis["models"] = self.analyze_models(include_code_samples, deep_analysis)
        if wanted("controllers"):
            analysis["controllers"] = self.analyze_controllers(include_code_samples, deep_analysis)
        if wanted("routes"):
            analysis["routes"] = self.analyze_routes()
        if wanted("views"):
            analysis["views"] = self.analyze_views(include_code_samples)
        for kind in (MIDDLEWARE, JOBS, EVENTS, POLICIES, COMMANDS):
            if wanted(kind.key):
                analysis[kind.key] = self.analyze_simple(kind, include_code_samples)

        if focus_area == "all":
            if self.is_enabled("migrations"):
                analysis["migrations"] = self.analyze_migrations(include_code_samples)
            if self.is_enabled("config"):
                analysis["config"] = self.analyze_configuration()
            if self.is_enabled("packages"):
                analysis["packages"] = self.analyze_packages()

        logger.info("Scanned %s (%s): %s", self.root, focus_area, {k: v.get("count") for k, v in analysis.items()})
        return analysis


def generate_summary(analysis: dict) -> dict:
    total = 0
    areas = []
    for kind, data in analysis.items():
        count = data.get("count")
        if count is None:
            continue
        total += count
        if count > 0:
            areas.append(kind)

    if total > HIGH_COMPLEXITY_COMPONENTS:
        complexity = "high"
    elif total > MEDIUM_COMPLEXITY_COMPONENTS:
        complexity = "medium"
    else:
        complexity = "low"

    return {"total_components": total, "feature_areas": areas, "complexity_score": complexity}


def analyze_application(
    scanner: LaravelProjectScanner,
    include_code_samples: bool = False,
    deep_analysis: bool = False,
    focus_area: str = "all",
    analyzed_at: Optional[str] = None,
) -> dict:
    """Full analyze-application payload."""
    if focus_area not in FOCUS_AREAS:
        raise ValueError(f"unknown focus area {focus_area!r}")

    analysis = scanner.analyze(include_code_samples, deep_analysis, focus_area)
    return {
        "application_info": scanner.application_info(analyzed_at),
        "feature_analysis": analysis,
        "summary": generate_summary(analysis),
    }
