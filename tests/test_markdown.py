# tests/test_markdown.py
"""Tests for the development plan markdown renderer."""

from laravel_app_developer.core.markdown import RenderOptions, render_plan
from laravel_app_developer.core.planning import build_plan


def _plan(**kwargs):
    kwargs.setdefault("features", ["login"])
    kwargs.setdefault("complexity", "simple")
    return build_plan("Shop", "An online shop", created_at="2025-01-01T00:00:00+00:00", **kwargs)


def test_render_detailed_plan():
    content = render_plan(_plan())

    assert content.startswith("# Shop - Development Plan\n")
    assert "> Generated: 2025-01-01T00:00:00+00:00" in content
    assert "#### Task #1: Initialize Laravel Project" in content
    assert "**Priority:** high | **Estimated Hours:** 2" in content
    assert "```bash\nRun: composer create-project laravel/laravel shop\n```" in content
    assert "- [ ] Laravel project created and configured" in content
    assert "**Dependencies:** None" in content
    assert "**Dependencies:** Tasks 1, 3" in content
    assert "### Phase 2 Tasks" in content
    assert "## 🧪 Testing Strategy" in content
    assert "## 🚀 Deployment Strategy" in content
    assert "## 👥 Team Structure" in content
    assert "## ⚠️ Risk Analysis" in content
    assert "**Total Duration:** 14 weeks" in content
    assert content.endswith("optimized for AI-assisted development.*\n")


def test_tasks_render_in_id_order():
    content = render_plan(_plan(features=["login", "search"]))
    positions = [content.index(f"#### Task #{task_id}:") for task_id in range(1, 11)]
    assert positions == sorted(positions)


def test_compact_template_drops_team_and_risks():
    content = render_plan(_plan(), RenderOptions(template_style="compact"))
    assert "Team Structure" not in content
    assert "Risk Analysis" not in content
    assert "#### Task #1: Initialize Laravel Project" in content


def test_estimates_can_be_hidden():
    content = render_plan(_plan(), RenderOptions(include_estimates=False))
    assert "Estimated Hours" not in content
    assert "**Duration:**" not in content
    assert "Total Duration" not in content
    assert "**Priority:** high\n" in content


def test_dependencies_can_be_hidden():
    content = render_plan(_plan(), RenderOptions(include_dependencies=False))
    assert "**Dependencies:**" not in content


def test_disabled_strategies_are_not_rendered():
    content = render_plan(_plan(include_testing=False, include_deployment=False))
    assert "Testing Strategy" not in content
    assert "Deployment Strategy" not in content


def test_output_is_stable_apart_from_timestamp():
    first = render_plan(build_plan("Shop", "An online shop", features=["login"], created_at="2025-01-01"))
    second = render_plan(build_plan("Shop", "An online shop", features=["login"], created_at="2025-06-30"))

    def strip_stamp(content):
        return [line for line in content.splitlines() if not line.startswith("> Generated:")]

    assert first != second
    assert strip_stamp(first) == strip_stamp(second)


def test_overview_requirements_and_architecture_details():
    content = render_plan(_plan(tech_stack="Laravel, Vue.js"))

    assert "### Scope\n- Development of Shop\n- Implementation of 1 core features" in content
    assert "- Timeline: quarter" in content
    assert "### Non-Functional Requirements\n- Performance: Response time < 2 seconds" in content
    assert "### Technical Requirements\n- Backend: Laravel, Vue.js" in content
    assert "### Data Flow\n- Client requests → API Layer" in content
    assert "### Security Considerations\n- Input validation and sanitization" in content
    assert "### Microservices" not in content


def test_microservice_plan_lists_services():
    content = render_plan(_plan(project_type="microservice", features=["billing"]))

    assert "**Pattern:** Microservices Architecture" in content
    assert "### Microservices" in content
    assert "- Authentication Service\n- API Gateway\n- billing Service" in content
    assert "**Data Management:** Database per service" in content
