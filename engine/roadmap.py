"""Roadmap generator.

Builds 5 to 8 phases. Each phase starts from a two-task base and grows
additively with the feature tags and project flags. Durations are picked
from fixed literals rather than computed.
"""

from typing import List, Optional

from contracts import ProjectRequirements, RoadmapPhase
from engine.traits import ProjectTraits


def _planning_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Project requirements analysis", "Technology stack finalization"]
    duration = "1 week"

    if t.is_complex or t.is_large_team:
        tasks += ["Architecture design", "Team role assignment", "Risk assessment"]
        duration = "2-3 weeks"
    if t.has_ml or t.has_data_processing:
        tasks += ["Data analysis and modeling strategy", "ML pipeline design"]
    if t.has_system_integration:
        tasks += ["Third-party API research", "Integration planning"]
    if t.is_beginner:
        tasks += ["Learning path creation", "Tutorial and documentation review"]
        duration = "1-2 weeks" if t.is_simple else "2-3 weeks"

    return RoadmapPhase(
        phase="Planning & Research",
        duration=duration,
        tasks=tasks,
        deliverables=["Project specification", "Technical architecture document", "Development timeline"],
    )


def _setup_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Development environment setup", "Version control initialization"]
    duration = "3-5 days"

    if t.is_complex or t.is_large_team:
        tasks += ["CI/CD pipeline setup", "Code quality tools configuration", "Team collaboration tools setup"]
        duration = "1-2 weeks"
    if t.has_gaming:
        tasks += ["Game engine setup", "Asset pipeline configuration"]
    if t.has_ml:
        tasks += ["ML development environment", "Data pipeline setup", "Model training infrastructure"]

    return RoadmapPhase(
        phase="Environment Setup",
        duration=duration,
        tasks=tasks,
        deliverables=["Configured development environment", "Project boilerplate", "CI/CD pipeline"],
    )


def _backend_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Database design and setup", "Core API development"]
    duration = "3-4 weeks"

    if t.has_auth:
        tasks.append("Authentication system implementation")
    if t.has_payments:
        tasks.append("Payment gateway integration")
    if t.has_api:
        tasks += ["RESTful API development", "API documentation"]
    if t.has_realtime:
        tasks.append("Real-time communication setup")
    if t.has_ml:
        tasks += ["ML model development", "Model training and validation", "ML API endpoints"]
        duration = "4-6 weeks"
    if t.has_gaming:
        tasks += ["Game logic implementation", "Physics system setup", "Multiplayer networking"]
        duration = "6-8 weeks"

    return RoadmapPhase(
        phase="Backend Development",
        duration=duration,
        tasks=tasks,
        deliverables=["Database schema", "Core APIs", "Authentication system"],
    )


def _frontend_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["UI/UX implementation", "Component development"]
    duration = "3-4 weeks"

    if t.has_admin:
        tasks.append("Admin dashboard development")
    if t.has_analytics:
        tasks.append("Analytics dashboard implementation")
    if t.has_file_storage:
        tasks.append("File upload interface")
    if t.has_seo:
        tasks.append("SEO optimization implementation")
    if t.has_gaming:
        tasks += ["Game UI development", "Game controls implementation", "Graphics optimization"]
        duration = "4-6 weeks"

    return RoadmapPhase(
        phase="Frontend Development",
        duration=duration,
        tasks=tasks,
        deliverables=["User interface", "Frontend components", "User experience flows"],
    )


def _integration_phase() -> RoadmapPhase:
    return RoadmapPhase(
        phase="System Integration",
        duration="2-3 weeks",
        tasks=[
            "Frontend-backend integration",
            "Third-party service integration",
            "End-to-end functionality testing",
            "Performance optimization",
        ],
        deliverables=["Integrated application", "Integration test results", "Performance benchmarks"],
    )


def _core_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Core feature implementation", "User interface development"]
    duration = "2-4 weeks"

    if t.has_auth:
        tasks.append("User authentication setup")
    if t.has_payments:
        tasks.append("Payment processing integration")
    if t.has_file_storage:
        tasks.append("File handling implementation")
    if t.has_analytics:
        tasks.append("Basic analytics implementation")
    if t.is_short_timeline:
        tasks.append("MVP feature prioritization")
        duration = "1-2 weeks"

    return RoadmapPhase(
        phase="Core Development",
        duration=duration,
        tasks=tasks,
        deliverables=["Working application", "Core features", "Basic UI"],
    )


def _testing_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Unit testing", "Integration testing"]
    duration = "1 week"

    if t.is_complex or t.is_large_team:
        tasks += ["End-to-end testing", "Performance testing", "Security testing", "User acceptance testing"]
        duration = "2-3 weeks"
    if t.has_payments:
        tasks += ["Payment flow testing", "Security audit"]
    if t.has_ml:
        tasks += ["Model validation", "A/B testing setup"]
    if t.has_gaming:
        tasks += ["Gameplay testing", "Performance optimization", "Device compatibility testing"]
    if t.is_beginner and not t.is_short_timeline:
        tasks.append("Code review and refactoring")
        duration = "1-2 weeks"

    return RoadmapPhase(
        phase="Testing & Quality Assurance",
        duration=duration,
        tasks=tasks,
        deliverables=["Test reports", "Bug fixes", "Performance metrics", "Quality assurance documentation"],
    )


def _deployment_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["Production environment setup", "Application deployment"]
    duration = "3-5 days"

    if t.is_complex or t.is_large_team:
        tasks += ["Load balancing setup", "Monitoring and logging configuration", "Backup systems setup"]
        duration = "1-2 weeks"
    if t.has_ml:
        tasks += ["ML model deployment", "Model monitoring setup"]
    if t.has_gaming:
        tasks += ["Game distribution setup", "Update mechanism implementation"]

    return RoadmapPhase(
        phase="Deployment & Launch",
        duration=duration,
        tasks=tasks,
        deliverables=["Live application", "Deployment documentation", "Monitoring dashboard"],
    )


def _post_launch_phase(t: ProjectTraits) -> RoadmapPhase:
    tasks = ["User feedback collection", "Performance monitoring"]
    duration = "2-4 weeks"

    if t.has_ml:
        tasks += ["Model performance monitoring", "Continuous model improvement"]
    if t.has_analytics:
        tasks += ["Analytics setup and monitoring", "User behavior analysis"]
    if t.is_long_timeline:
        tasks += ["Feature enhancement planning", "Scalability improvements"]
        duration = "4-8 weeks"

    return RoadmapPhase(
        phase="Post-Launch & Optimization",
        duration=duration,
        tasks=tasks,
        deliverables=["User feedback report", "Performance optimization", "Future roadmap"],
    )


def generate_roadmap(req: ProjectRequirements, traits: Optional[ProjectTraits] = None) -> List[RoadmapPhase]:
    """Build the ordered list of roadmap phases for the requirements."""
    t = traits or ProjectTraits.from_requirements(req)

    phases = [_planning_phase(t), _setup_phase(t)]

    # Complex, ML and gaming projects split development into three phases
    if t.is_complex or t.has_ml or t.has_gaming:
        phases += [_backend_phase(t), _frontend_phase(t), _integration_phase()]
    else:
        phases.append(_core_phase(t))

    phases += [_testing_phase(t), _deployment_phase(t)]

    if t.is_complex or t.is_long_timeline or t.has_ml:
        phases.append(_post_launch_phase(t))

    return phases
