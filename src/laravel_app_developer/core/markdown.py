"""Render a development plan dict (see ``core.planning``) as markdown."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    template_style: str = "detailed"
    include_estimates: bool = True
    include_dependencies: bool = True

    @property
    def compact(self) -> bool:
        return self.template_style == "compact"


def _title(key: str) -> str:
    return key.replace("_", " ").capitalize()


def _bullets(items) -> list[str]:
    return [f"- {item}" for item in items]


def _strategy_section(heading: str, strategy: dict) -> list[str]:
    lines = [heading, ""]
    for key, details in strategy.items():
        lines.append(f"### {_title(key)}")
        if isinstance(details, (list, tuple)):
            lines.extend(_bullets(details))
        else:
            lines.append(str(details))
        lines.append("")
    return lines


def _table_of_contents(plan: dict, options: RenderOptions) -> list[str]:
    entries = [
        ("Project Overview", "project-overview"),
        ("Requirements", "requirements"),
        ("Architecture", "architecture"),
        ("Technology Stack", "technology-stack"),
        ("Development Phases", "development-phases"),
        ("Detailed Tasks", "detailed-tasks"),
    ]
    if "testing_strategy" in plan:
        entries.append(("Testing Strategy", "testing-strategy"))
    if "deployment_strategy" in plan:
        entries.append(("Deployment Strategy", "deployment-strategy"))
    entries.append(("Timeline", "timeline"))
    if not options.compact:
        entries.append(("Team Structure", "team-structure"))
        entries.append(("Risk Analysis", "risk-analysis"))
    entries.append(("Success Metrics", "success-metrics"))

    lines = ["## 📋 Table of Contents", ""]
    lines.extend(f"- [{name}](#{anchor})" for name, anchor in entries)
    lines.append("")
    return lines


def _task(task: dict, options: RenderOptions) -> list[str]:
    header = f"**Priority:** {task['priority']}"
    if options.include_estimates:
        header += f" | **Estimated Hours:** {task['estimated_hours']}"

    lines = [
        f"#### Task #{task['id']}: {task['title']}",
        header,
        "",
        f"**Description:** {task['description']}",
        "",
        "**AI Instructions:**",
        "```bash",
        task["ai_instructions"],
        "```",
        "",
        "**Acceptance Criteria:**",
    ]
    lines.extend(f"- [ ] {criteria}" for criteria in task["acceptance_criteria"])
    lines.append("")

    if options.include_dependencies:
        dependencies = task["dependencies"]
        if dependencies:
            lines.append("**Dependencies:** Tasks " + ", ".join(str(d) for d in dependencies))
        else:
            lines.append("**Dependencies:** None")
        lines.append("")

    lines.extend(["---", ""])
    return lines


def render_plan(plan: dict, options: RenderOptions | None = None) -> str:
    """Serialize ``plan`` into the DEVELOPMENT_PLAN.md layout.

    Output depends only on the plan contents and ``options``; the only
    time-varying line is the ``Generated:`` stamp from the plan metadata.
    """
    options = options or RenderOptions()
    metadata = plan["metadata"]
    overview = plan["project_overview"]
    requirements = plan["requirements"]
    architecture = plan["architecture"]

    lines = [
        f"# {metadata['project_name']} - Development Plan",
        "",
        "> **AI-Optimized Development Plan**  ",
        f"> Generated: {metadata['created_at']}  ",
        f"> Complexity: {metadata['complexity']}  ",
        f"> Version: {metadata['version']}",
        "",
    ]
    lines.extend(_table_of_contents(plan, options))

    lines.extend(["## 🎯 Project Overview", "", f"**Description:** {overview['description']}", "", "### Goals"])
    lines.extend(_bullets(overview["goals"]))
    lines.extend(["", "### Scope"])
    lines.extend(_bullets(overview["scope"]))
    lines.extend(["", "### Constraints"])
    lines.extend(_bullets(overview["constraints"]))
    lines.append("")

    lines.extend(["## 📋 Requirements", "", "### Functional Requirements"])
    lines.extend(_bullets(requirements["functional_requirements"]))
    lines.extend(["", "### Non-Functional Requirements"])
    lines.extend(_bullets(requirements["non_functional_requirements"]))
    lines.extend(["", "### Technical Requirements"])
    lines.extend(_bullets(requirements["technical_requirements"]))
    lines.extend(["", "### User Stories"])
    lines.extend(f"- **{story['role']}**: {story['story']}" for story in requirements["user_stories"])
    lines.append("")

    lines.extend(["## 🏗️ Architecture", "", f"**Pattern:** {architecture['pattern']}", "", "### Components"])
    lines.extend(f"- **{c['name']}**: {c['description']}" for c in architecture["components"])
    lines.extend(["", "### Data Flow"])
    lines.extend(_bullets(architecture["data_flow"]))
    lines.extend(["", "### Security Considerations"])
    lines.extend(_bullets(architecture["security_considerations"]))
    lines.append("")
    if "microservices" in architecture:
        microservices = architecture["microservices"]
        lines.extend(["### Microservices", "", "**Services:**"])
        lines.extend(_bullets(microservices["services"]))
        lines.extend([
            "",
            f"**Communication:** {microservices['communication']}  ",
            f"**Data Management:** {microservices['data_management']}  ",
            f"**Deployment:** {microservices['deployment']}",
            "",
        ])

    lines.extend(["## 💻 Technology Stack", ""])
    for category, technologies in plan["tech_stack"].items():
        lines.append(f"### {_title(category)}")
        lines.extend(_bullets(technologies))
        lines.append("")

    lines.extend(["## 📅 Development Phases", ""])
    for phase in plan["phases"]:
        lines.append(f"### Phase {phase['phase']}: {phase['name']}")
        if options.include_estimates:
            lines.append(f"**Duration:** {phase['duration']} weeks  ")
        lines.extend([f"**Description:** {phase['description']}", "", "**Deliverables:**"])
        lines.extend(_bullets(phase["deliverables"]))
        lines.append("")

    lines.extend([
        "## ✅ Detailed Tasks",
        "",
        "> **For AI Developers:** Each task includes specific acceptance criteria and implementation instructions.",
        "",
    ])
    for phase_key, tasks in plan["tasks"].items():
        phase_number = phase_key.removeprefix("phase_").removesuffix("_tasks")
        lines.extend([f"### Phase {phase_number} Tasks", ""])
        for task in tasks:
            lines.extend(_task(task, options))

    if "testing_strategy" in plan:
        lines.extend(_strategy_section("## 🧪 Testing Strategy", plan["testing_strategy"]))
    if "deployment_strategy" in plan:
        lines.extend(_strategy_section("## 🚀 Deployment Strategy", plan["deployment_strategy"]))

    timeline = plan["project_timeline"]
    lines.extend(["## ⏱️ Timeline", ""])
    if options.include_estimates:
        lines.extend([f"**Total Duration:** {timeline['total_duration']} weeks", ""])
    lines.extend(f"- **Week {m['week']}:** {m['milestone']}" for m in timeline["milestones"])
    lines.append("")

    if not options.compact:
        lines.extend(["## 👥 Team Structure", ""])
        lines.extend(_bullets(plan["team_structure"]))
        lines.append("")
        lines.extend(_strategy_section("## ⚠️ Risk Analysis", plan["risk_analysis"]))

    lines.extend(["## 📊 Success Metrics", ""])
    lines.extend(_bullets(plan["success_metrics"]))
    lines.extend([
        "",
        "---",
        "",
        "*This development plan was generated by Laravel App Developer MCP Server "
        "and optimized for AI-assisted development.*",
    ])
    return "\n".join(lines) + "\n"
