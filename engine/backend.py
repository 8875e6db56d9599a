"""Backend selector."""

from typing import List, Optional

from contracts import BackendRecommendation as BE, ProjectRequirements
from engine.rules import Rule, always, evaluate
from engine.traits import ProjectTraits


BACKEND_RULES: List[Rule[BE]] = [
    Rule(
        "frontend_only",
        lambda t: t.is_frontend_only,
        BE(
            primary="Not Required (Frontend Only)",
            database="Browser Storage/External APIs",
            reasoning="This is a frontend-only project, backend will be handled by external services or APIs",
        ),
    ),
    Rule(
        "static_content",
        lambda t: t.is_static_content and not t.has_file_storage,
        BE(
            primary="Static Hosting (No Backend)",
            database="None (Static Content)",
            reasoning="Static sites don't require backend infrastructure, reducing costs and complexity",
        ),
    ),
    Rule(
        "gaming_native",
        lambda t: t.has_gaming and t.needs_high_performance,
        BE(
            primary="C++ with Custom Engine",
            database="SQLite/Custom File Format",
            reasoning="Maximum performance for game logic, physics, and real-time processing",
        ),
    ),
    # Unreachable: gaming always counts as high performance
    Rule(
        "gaming",
        lambda t: t.has_gaming,
        BE(
            primary="C# with ASP.NET Core",
            database="SQL Server/PostgreSQL",
            reasoning="Excellent integration with Unity, robust multiplayer capabilities",
        ),
    ),
    Rule(
        "machine_learning",
        lambda t: t.has_ml,
        BE(
            primary="Python with FastAPI",
            database="PostgreSQL + Redis",
            reasoning="Excellent ML libraries ecosystem with high-performance async API framework",
        ),
    ),
    Rule(
        "data_processing",
        lambda t: t.needs_data_work and not t.has_ml,
        BE(
            primary="Python with Django",
            database="PostgreSQL",
            reasoning="Robust framework with excellent data handling and scientific computing integration",
        ),
    ),
    Rule(
        "high_performance_advanced",
        lambda t: t.needs_high_performance and t.is_advanced,
        BE(
            primary="Rust with Actix-web",
            database="PostgreSQL",
            reasoning="Memory-safe systems programming with exceptional performance and concurrency",
        ),
    ),
    Rule(
        "high_performance",
        lambda t: t.needs_high_performance and not t.is_beginner,
        BE(
            primary="Go with Gin/Fiber",
            database="PostgreSQL",
            reasoning="Excellent performance, built-in concurrency, and fast compilation for high-load applications",
        ),
    ),
    Rule(
        "realtime_advanced",
        lambda t: t.has_realtime and t.is_advanced,
        BE(
            primary="Go with WebSocket",
            database="Redis + PostgreSQL",
            reasoning="Superior concurrency handling for real-time applications with excellent performance",
        ),
    ),
    Rule(
        "realtime",
        lambda t: t.has_realtime,
        BE(
            primary="Node.js with Socket.io",
            database="Redis + PostgreSQL",
            reasoning="Excellent real-time capabilities with WebSocket support and caching",
        ),
    ),
    Rule(
        "payments_low_budget",
        lambda t: t.has_payments and t.is_low_budget,
        BE(
            primary="PHP with Laravel",
            database="MySQL",
            reasoning="Cost-effective with extensive e-commerce packages and shared hosting compatibility",
        ),
    ),
    Rule(
        "payments_advanced",
        lambda t: t.has_payments and t.is_advanced,
        BE(
            primary="Java with Spring Boot",
            database="PostgreSQL",
            reasoning="Robust architecture for complex e-commerce logic with excellent payment integrations",
        ),
    ),
    Rule(
        "payments",
        lambda t: t.has_payments,
        BE(
            primary="Node.js with Express",
            database="PostgreSQL",
            reasoning="Full control over e-commerce logic with robust payment and inventory management",
        ),
    ),
    Rule(
        "large_team",
        lambda t: t.is_large_team,
        BE(
            primary="Java with Spring Boot",
            database="PostgreSQL/Oracle",
            reasoning="Enterprise-grade framework with excellent tooling, scalability, and team collaboration features",
        ),
    ),
    Rule(
        "complex_advanced",
        lambda t: t.is_complex and t.is_advanced,
        BE(
            primary="Java with Spring Boot",
            database="PostgreSQL",
            reasoning="Enterprise-grade framework with comprehensive features and excellent tooling",
        ),
    ),
    Rule(
        "beginner_low_budget",
        lambda t: t.is_beginner and t.is_low_budget,
        BE(
            primary="Python with Flask",
            database="SQLite",
            reasoning="Simple, lightweight framework perfect for learning with minimal setup requirements",
        ),
    ),
    Rule(
        "beginner",
        lambda t: t.is_beginner,
        BE(
            primary="Node.js with Express",
            database="MongoDB",
            reasoning="JavaScript everywhere - easy to learn with consistent language across frontend and backend",
        ),
    ),
    Rule(
        "intermediate_managed",
        lambda t: t.is_intermediate and (t.has_auth or t.has_file_storage),
        BE(
            primary="Supabase (PostgreSQL)",
            database="PostgreSQL (Supabase)",
            reasoning="Open-source Firebase alternative with built-in authentication and file storage",
        ),
    ),
    Rule(
        "intermediate",
        lambda t: t.is_intermediate,
        BE(
            primary="Python with Django",
            database="PostgreSQL",
            reasoning="Batteries-included framework with excellent documentation and rapid development",
        ),
    ),
    # Unreachable: large or complex advanced projects match earlier rows
    Rule(
        "advanced_enterprise",
        lambda t: t.is_advanced and (t.is_large_team or t.is_complex),
        BE(
            primary="Java with Spring Boot",
            database="PostgreSQL",
            reasoning="Enterprise-grade framework with excellent tooling, scalability, and team collaboration features",
        ),
    ),
    Rule(
        "advanced",
        lambda t: t.is_advanced,
        BE(
            primary="Python with FastAPI",
            database="PostgreSQL",
            reasoning="Modern Python framework with automatic API documentation and excellent performance",
        ),
    ),
    Rule(
        "expert",
        lambda t: t.is_expert,
        BE(
            primary="Rust with Actix-web",
            database="PostgreSQL",
            reasoning="Memory-safe systems programming with exceptional performance and modern async capabilities",
        ),
    ),
    Rule(
        "default",
        always,
        BE(
            primary="Node.js with Express",
            database="PostgreSQL",
            reasoning="Versatile JavaScript runtime with excellent ecosystem and community support",
        ),
    ),
]


def select_backend(req: ProjectRequirements, traits: Optional[ProjectTraits] = None) -> BE:
    """Pick the backend recommendation for the requirements."""
    traits = traits or ProjectTraits.from_requirements(req)
    return evaluate(BACKEND_RULES, traits, "backend")
