"""Development plan builder.

Produces the nested plan structure (phases, tasks, strategies, timeline,
team, risks, metrics) that ``core.markdown`` renders to DEVELOPMENT_PLAN.md.
The plan is pure data; writing it to disk is the caller's job.
"""

from __future__ import annotations

import copy
import logging
import math
from typing import Optional

from .models import Complexity

logger = logging.getLogger(__name__)

COMPLEXITY_MULTIPLIERS = {
    Complexity.SIMPLE: 0.7,
    Complexity.MEDIUM: 1.0,
    Complexity.COMPLEX: 1.5,
    Complexity.ENTERPRISE: 2.0,
}

BASE_PHASE_WEEKS = {1: 2, 2: 4, 3: 3, 4: 3, 5: 2, 6: 1}

PHASE_DELIVERABLES = {
    1: ["Project repository setup", "Development environment configured", "Database schema designed"],
    2: ["Core models and controllers", "API endpoints", "Database migrations"],
    3: ["User interface components", "Frontend-backend integration", "Responsive design"],
    4: ["Advanced features implemented", "Third-party integrations", "Performance optimizations"],
    5: ["Test suites completed", "Bug fixes and optimizations", "Code review completed"],
    6: ["Production deployment", "Monitoring setup", "Documentation completed"],
}

ARCHITECTURE_PATTERNS = {
    "web_application": "MVC (Model-View-Controller)",
    "mobile_app": "MVVM (Model-View-ViewModel)",
    "api": "RESTful API with Repository Pattern",
    "microservice": "Microservices Architecture",
    "full_stack": "Layered Architecture",
}
DEFAULT_ARCHITECTURE_PATTERN = "MVC (Model-View-Controller)"

TEAM_STRUCTURES = {
    Complexity.SIMPLE: ["Full-stack Developer", "Project Manager"],
    Complexity.MEDIUM: ["Backend Developer", "Frontend Developer", "Project Manager"],
    Complexity.COMPLEX: ["Backend Developer", "Frontend Developer", "DevOps Engineer", "QA Engineer", "Project Manager"],
    Complexity.ENTERPRISE: [
        "Senior Backend Developer", "Senior Frontend Developer", "DevOps Engineer", "QA Engineer",
        "Security Specialist", "Project Manager", "Technical Lead",
    ],
}

COMPLEX_TASK_KEYWORDS = ("reporting", "analytics", "integration", "automation")
HIGH_PRIORITY_KEYWORDS = ("authentication", "user", "login", "security")
LOW_PRIORITY_KEYWORDS = ("reporting", "analytics", "export")
BASE_FEATURE_HOURS = {"backend": 6, "frontend": 4}

TECH_STACK_BUCKETS = (
    ("backend", ("laravel", "php")),
    ("frontend", ("vue", "react", "angular")),
    ("database", ("mysql", "postgres", "sqlite")),
)


def slugify(name: str) -> str:
    return name.lower().replace(" ", "-")


def calculate_phase_duration(phase: int, complexity: str) -> int:
    multiplier = COMPLEXITY_MULTIPLIERS.get(complexity, 1.0)
    return math.ceil(BASE_PHASE_WEEKS[phase] * multiplier)


def estimate_feature_hours(feature: str, layer: str) -> int:
    hours = BASE_FEATURE_HOURS[layer]
    if any(keyword in feature.lower() for keyword in COMPLEX_TASK_KEYWORDS):
        return hours * 2
    return hours


def determine_feature_priority(feature: str) -> str:
    feature = feature.lower()
    if any(keyword in feature for keyword in HIGH_PRIORITY_KEYWORDS):
        return "high"
    if any(keyword in feature for keyword in LOW_PRIORITY_KEYWORDS):
        return "low"
    return "medium"


def split_tech_stack(tech_stack: str) -> dict[str, list[str]]:
    """Bucket a comma-separated stack into backend / frontend / database / tools."""
    details: dict[str, list[str]] = {"backend": [], "frontend": [], "database": [], "tools": []}
    for tech in tech_stack.split(","):
        tech = tech.strip()
        if not tech:
            continue
        lower = tech.lower()
        bucket = next((name for name, keywords in TECH_STACK_BUCKETS if any(k in lower for k in keywords)), "tools")
        details[bucket].append(tech)
    return details


def generate_phases(complexity: str, include_testing: bool, include_deployment: bool) -> list[dict]:
    phases = [
        {
            "phase": 1,
            "name": "Project Setup & Foundation",
            "description": "Set up development environment, project structure, and core infrastructure",
            "duration": calculate_phase_duration(1, complexity),
            "dependencies": [],
            "deliverables": list(PHASE_DELIVERABLES[1]),
        },
        {
            "phase": 2,
            "name": "Core Backend Development",
            "description": "Implement core business logic, database design, and API endpoints",
            "duration": calculate_phase_duration(2, complexity),
            "dependencies": [1],
            "deliverables": list(PHASE_DELIVERABLES[2]),
        },
        {
            "phase": 3,
            "name": "Frontend Development",
            "description": "Build user interface, user experience, and frontend integrations",
            "duration": calculate_phase_duration(3, complexity),
            "dependencies": [2],
            "deliverables": list(PHASE_DELIVERABLES[3]),
        },
        {
            "phase": 4,
            "name": "Feature Enhancement",
            "description": "Implement advanced features and integrations",
            "duration": calculate_phase_duration(4, complexity),
            "dependencies": [2, 3],
            "deliverables": list(PHASE_DELIVERABLES[4]),
        },
    ]

    if include_testing:
        phases.append({
            "phase": 5,
            "name": "Testing & Quality Assurance",
            "description": "Comprehensive testing, bug fixes, and performance optimization",
            "duration": calculate_phase_duration(5, complexity),
            "dependencies": [1, 2, 3, 4],
            "deliverables": list(PHASE_DELIVERABLES[5]),
        })

    if include_deployment:
        phases.append({
            "phase": len(phases) + 1,
            "name": "Deployment & Launch",
            "description": "Production deployment, monitoring setup, and go-live activities",
            "duration": calculate_phase_duration(6, complexity),
            "dependencies": [p["phase"] for p in phases],
            "deliverables": list(PHASE_DELIVERABLES[6]),
        })

    return phases


def generate_tasks(project_name: str, features: list[str]) -> dict[str, list[dict]]:
    """Tasks grouped per phase, numbered sequentially from 1."""
    next_id = 1

    def task(phase: int, title: str, description: str, criteria: list[str], instructions: str,
             hours: int, priority: str, dependencies: list[int]) -> dict:
        nonlocal next_id
        entry = {
            "id": next_id,
            "phase": phase,
            "title": title,
            "description": description,
            "acceptance_criteria": criteria,
            "ai_instructions": instructions,
            "estimated_hours": hours,
            "priority": priority,
            "dependencies": dependencies,
        }
        next_id += 1
        return entry

    setup = task(
        1, "Initialize Laravel Project", "Create new Laravel project with proper configuration",
        ["Laravel project created and configured", "Environment files set up",
         "Database connection established", "Basic routing working"],
        f"Run: composer create-project laravel/laravel {slugify(project_name)}",
        2, "high", [],
    )
    tooling = task(
        1, "Setup Development Environment", "Configure development tools, linting, and code standards",
        ["Code linting configured (Pint/PHP-CS-Fixer)", "PHPStan/Psalm for static analysis",
         "Git hooks for code quality", "IDE configuration files created"],
        "Install and configure: laravel/pint, phpstan/phpstan, set up pre-commit hooks",
        4, "high", [setup["id"]],
    )
    database = task(
        1, "Database Design", "Design and create database schema with migrations",
        ["Entity Relationship Diagram created", "Migration files created for all entities",
         "Seeders created for test data", "Database relationships properly defined"],
        "Create migrations using: php artisan make:migration, define relationships, create seeders",
        8, "high", [tooling["id"]],
    )

    backend = [
        task(
            2, f"Implement {feature} Backend", f"Create backend logic for {feature} functionality",
            [f"Model created for {feature}", "Controller with CRUD operations", "API endpoints defined and tested",
             "Validation rules implemented", "Database queries optimized"],
            f"Create: Model, Controller, Request classes, API routes for {feature}",
            estimate_feature_hours(feature, "backend"), determine_feature_priority(feature),
            [setup["id"], database["id"]],
        )
        for feature in features
    ]

    frontend = [
        task(
            3, f"Implement {feature} Frontend", f"Create user interface for {feature} functionality",
            [f"Vue/React components created for {feature}", "Forms and validation implemented",
             "API integration completed", "Responsive design implemented", "User experience optimized"],
            f"Create: Vue/React components, forms, API calls, styling for {feature}",
            estimate_feature_hours(feature, "frontend"), determine_feature_priority(feature),
            [backend_task["id"]],
        )
        for feature, backend_task in zip(features, backend)
    ]

    advanced = [
        task(
            4, "Implement User Authentication & Authorization",
            "Complete user management system with roles and permissions",
            ["User registration and login", "Password reset functionality", "Role-based access control",
             "API authentication (Sanctum/Passport)", "Email verification"],
            "Implement: Laravel Sanctum/Passport, Spatie permissions, email verification",
            12, "high", [],
        ),
        task(
            4, "Add Search Functionality", "Implement comprehensive search across the application",
            ["Full-text search implemented", "Search filters and sorting", "Search performance optimized",
             "Auto-complete functionality"],
            "Implement: Laravel Scout, Elasticsearch/Algolia integration, search API endpoints",
            10, "medium", [],
        ),
        task(
            4, "Notification System", "Implement comprehensive notification system",
            ["Email notifications", "In-app notifications", "Push notifications (optional)",
             "Notification preferences"],
            "Create: Notification classes, email templates, notification center UI",
            8, "medium", [],
        ),
    ]

    return {
        "phase_1_tasks": [setup, tooling, database],
        "phase_2_tasks": backend,
        "phase_3_tasks": frontend,
        "phase_4_tasks": advanced,
    }


def generate_timeline(phases: list[dict]) -> dict:
    milestones = []
    week = 0
    for phase in phases:
        week += phase["duration"]
        milestones.append({"week": week, "milestone": f"{phase['name']} completed"})
    return {"total_duration": week, "milestones": milestones}


def generate_architecture(project_type: str, features: list[str]) -> dict:
    architecture = {
        "pattern": ARCHITECTURE_PATTERNS.get(project_type, DEFAULT_ARCHITECTURE_PATTERN),
        "components": [
            {"name": "Presentation Layer", "description": "User interface and user experience components"},
            {"name": "Business Logic Layer", "description": "Core application logic and business rules"},
            {"name": "Data Access Layer", "description": "Database operations and data management"},
            {"name": "API Layer", "description": "RESTful API endpoints for data operations"},
            {"name": "Authentication Layer", "description": "User authentication and authorization"},
        ],
        "data_flow": [
            "Client requests → API Layer",
            "API Layer → Authentication Layer",
            "API Layer → Business Logic Layer",
            "Business Logic Layer → Data Access Layer",
            "Data Access Layer → Database",
        ],
        "security_considerations": [
            "Input validation and sanitization",
            "SQL injection prevention",
            "XSS protection",
            "CSRF token implementation",
            "Rate limiting for API endpoints",
            "Secure password hashing",
            "JWT token management",
        ],
    }

    if project_type == "microservice":
        architecture["microservices"] = {
            "services": ["Authentication Service", "API Gateway"] + [f"{feature} Service" for feature in features],
            "communication": "REST for synchronous calls, message queue for domain events",
            "data_management": "Database per service",
            "deployment": "Containerized services behind the API gateway",
        }

    return architecture


def generate_requirements(features: list[str], tech_stack: str) -> dict:
    return {
        "functional_requirements": [f"The system shall support {feature} functionality" for feature in features],
        "non_functional_requirements": [
            "Performance: Response time < 2 seconds",
            "Scalability: Support for 1000+ concurrent users",
            "Security: Data encryption and secure authentication",
            "Usability: Intuitive user interface",
            "Reliability: 99.9% uptime",
        ],
        "technical_requirements": [
            f"Backend: {tech_stack}",
            "Database: MySQL/PostgreSQL",
            "Frontend: Modern JavaScript framework",
            "API: RESTful API design",
            "Security: OAuth 2.0 / JWT authentication",
        ],
        "user_stories": [
            {"role": "As a user", "story": f"I want to {feature} so that I can accomplish my goals effectively"}
            for feature in features
        ],
    }


TESTING_STRATEGY = {
    "unit_testing": ["PHPUnit for backend testing", "Test coverage minimum 80%", "Model and service layer tests"],
    "integration_testing": ["API endpoint testing", "Database integration tests", "Third-party service mocking"],
    "frontend_testing": ["Vue Test Utils / React Testing Library", "Component unit tests", "End-to-end testing with Cypress"],
    "performance_testing": ["Load testing with Apache Bench", "Database query optimization", "Frontend performance audits"],
}

DEPLOYMENT_STRATEGY = {
    "staging_environment": ["Staging server setup", "Automated deployment pipeline", "Environment configuration management"],
    "production_deployment": ["Production server configuration", "SSL certificate setup", "Database migration strategy", "Zero-downtime deployment"],
    "monitoring": ["Application performance monitoring", "Error tracking and logging", "Uptime monitoring", "Security monitoring"],
}

RISK_ANALYSIS = {
    "technical_risks": ["Technology learning curve", "Third-party API dependencies", "Performance bottlenecks", "Security vulnerabilities"],
    "project_risks": ["Scope creep", "Timeline delays", "Resource availability", "Requirement changes"],
    "mitigation_strategies": ["Regular code reviews", "Continuous integration/deployment", "Comprehensive testing", "Documentation and knowledge sharing"],
}

SUCCESS_METRICS = [
    "Technical Metrics: Code coverage > 80%, Performance < 2s response time",
    "Project Metrics: Delivered on time and within budget",
    "Quality Metrics: Bug-free production deployment",
    "User Metrics: Positive user feedback and adoption",
    "Business Metrics: All requirements met and validated",
]

AI_INSTRUCTIONS = {
    "overview": "This development plan is optimized for AI-assisted development",
    "task_format": "Each task includes specific acceptance criteria and implementation commands",
    "dependencies": "Task dependencies are clearly marked - complete prerequisite tasks first",
    "testing": "Run tests after each major feature implementation",
    "git_workflow": "Commit frequently with descriptive messages, create feature branches",
    "code_standards": "Follow PSR standards for PHP, use consistent naming conventions",
}


def build_plan(
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
    created_at: Optional[str] = None,
) -> dict:
    """Assemble the complete development plan.

    Testing and deployment sections are omitted entirely (not set to None)
    when disabled.
    """
    features = features or []
    phases = generate_phases(complexity, include_testing, include_deployment)

    plan = {
        "metadata": {
            "project_name": project_name,
            "project_type": project_type,
            "complexity": complexity,
            "target_audience": target_audience,
            "created_at": created_at,
            "version": "1.0",
            "ai_optimized": True,
        },
        "project_overview": {
            "description": description,
            "goals": [
                f"Create a fully functional {project_type} for {target_audience}",
                "Implement all requested features with high quality",
                "Ensure scalable and maintainable code architecture",
                "Deliver within the specified timeline and budget",
            ],
            "scope": [
                f"Development of {project_name}",
                f"Implementation of {len(features)} core features",
                "Responsive web interface (if applicable)",
                "API development for data operations",
                "Database design and implementation",
            ],
            "constraints": [
                f"Timeline: {timeline}",
                f"Technology stack: {tech_stack}",
                f"Target audience: {target_audience}",
                f"Complexity level: {complexity}",
            ],
        },
        "requirements": generate_requirements(features, tech_stack),
        "architecture": generate_architecture(project_type, features),
        "tech_stack": split_tech_stack(tech_stack),
        "phases": phases,
        "tasks": generate_tasks(project_name, features),
        "project_timeline": generate_timeline(phases),
        "team_structure": list(TEAM_STRUCTURES.get(complexity, TEAM_STRUCTURES[Complexity.MEDIUM])),
        "risk_analysis": copy.deepcopy(RISK_ANALYSIS),
        "success_metrics": list(SUCCESS_METRICS),
    }

    if include_testing:
        plan["testing_strategy"] = copy.deepcopy(TESTING_STRATEGY)
    if include_deployment:
        plan["deployment_strategy"] = copy.deepcopy(DEPLOYMENT_STRATEGY)

    logger.debug("Built plan for %s with %d phases", project_name, len(phases))
    return plan


def count_total_tasks(plan: dict) -> int:
    return sum(len(tasks) for tasks in plan["tasks"].values())


def plan_summary(plan: dict) -> dict:
    return {
        "project_name": plan["metadata"]["project_name"],
        "total_phases": len(plan["phases"]),
        "total_tasks": count_total_tasks(plan),
        "estimated_duration": plan["project_timeline"]["total_duration"],
        "complexity_level": plan["metadata"]["complexity"],
    }


def plan_structure(plan: dict) -> dict:
    return {
        "phases": [phase["name"] for phase in plan["phases"]],
        "task_distribution": {key: len(tasks) for key, tasks in plan["tasks"].items()},
        "includes_testing": "testing_strategy" in plan,
        "includes_deployment": "deployment_strategy" in plan,
    }
