"""Engine policy constants: single source for every threshold the rules use."""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ComplexityPolicy:
    """Feature-count gates."""
    complex_above: int = 6    # more than 6 tags = complex
    simple_at_most: int = 3   # 3 or fewer tags = simple


@dataclass(frozen=True)
class TeamPolicy:
    """Which team size labels count as large / medium.

    Only the form's "16+" label is large by default; add
    "Large team (10+ people)" here to honour the older client list.
    """
    large_team_labels: Tuple[str, ...] = ("Large team (16+ people)",)
    medium_team_labels: Tuple[str, ...] = ("Medium team (6-15 people)",)
    known_labels: Tuple[str, ...] = (
        "Solo (1 person)",
        "Small team (2-5 people)",
        "Medium team (6-15 people)",
        "Large team (16+ people)",
    )


@dataclass(frozen=True)
class BudgetPolicy:
    """Substring markers in budget labels."""
    free_marker: str = "Free"
    low_budget_markers: Tuple[str, ...] = ("Free", "Under")


@dataclass(frozen=True)
class SchedulePolicy:
    """Timeline labels that change roadmap durations."""
    short_timeline_labels: Tuple[str, ...] = ("Less than 1 month",)
    long_timeline_labels: Tuple[str, ...] = ("6-12 months", "More than 1 year", "Over 1 year")


@dataclass(frozen=True)
class TimelinePolicy:
    """Constants of the week estimator. Defaults keep output compatible."""
    # (beginner, intermediate, advanced-or-expert) base weeks per size bucket
    simple_base: Tuple[int, int, int] = (6, 4, 4)
    typical_base: Tuple[int, int, int] = (10, 9, 8)
    complex_base: Tuple[int, int, int] = (16, 14, 12)

    feature_weeks: Dict[str, int] = field(default_factory=lambda: {
        "Machine Learning": 4,
        "Gaming": 6,
        "Payment Processing": 2,
        "Real-time Updates": 2,
        "System Integration": 3,
        "Data Processing": 2,
    })

    large_team_factor: float = 0.7    # parallel work
    large_team_overhead: float = 2    # coordination weeks
    medium_team_factor: float = 0.8
    medium_team_overhead: float = 1

    weeks_per_month: int = 4
    working_days_per_week: int = 5

    short_term_max: int = 4
    medium_term_max: int = 12
    long_term_max: int = 24

    planning_share: float = 0.15
    development_share: float = 0.60
    testing_share: float = 0.15
    deployment_share: float = 0.10

    mvp_share: float = 0.6
    beta_share: float = 0.85

    range_min_slack: int = 2
    range_max_slack: int = 4
    buffer_share: float = 0.2


@dataclass(frozen=True)
class EnginePolicy:
    """Top-level policy aggregating all sub-policies."""
    complexity: ComplexityPolicy = field(default_factory=ComplexityPolicy)
    teams: TeamPolicy = field(default_factory=TeamPolicy)
    budget: BudgetPolicy = field(default_factory=BudgetPolicy)
    schedule: SchedulePolicy = field(default_factory=SchedulePolicy)
    timeline: TimelinePolicy = field(default_factory=TimelinePolicy)


# Singleton, import this everywhere
engine_policy = EnginePolicy()
