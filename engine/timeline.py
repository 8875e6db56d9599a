"""Timeline estimator.

Base weeks come from a (size bucket x experience) table, tagged features
add fixed weeks, team size scales the total, and everything else
(months, working days, breakdown, milestones, range, buffer) is derived
from the rounded week count.
"""

import math
from typing import List, Optional, Tuple

from contracts import (
    BufferTime,
    EstimatedDuration,
    ProjectRequirements,
    TimelineBreakdown,
    TimelineEstimate,
    TimelineMilestone,
    TimelineRange,
)
from engine.policy import EnginePolicy, TimelinePolicy, engine_policy
from engine.traits import ProjectTraits

BUFFER_REASON = "Account for unexpected challenges and scope changes"


def _base_weeks(t: ProjectTraits, policy: TimelinePolicy) -> int:
    if t.is_simple:
        row = policy.simple_base
    elif t.is_complex:
        row = policy.complex_base
    else:
        row = policy.typical_base

    if t.is_beginner:
        return row[0]
    if t.is_advanced_or_expert:
        return row[2]
    return row[1]


def estimate_weeks(
    req: ProjectRequirements,
    traits: Optional[ProjectTraits] = None,
    policy: EnginePolicy = engine_policy,
) -> int:
    """Total calendar weeks, rounded up, never below 1."""
    t = traits or ProjectTraits.from_requirements(req, policy)
    tp = policy.timeline

    weeks = _base_weeks(t, tp)
    for tag, extra in tp.feature_weeks.items():
        if req.has_feature(tag):
            weeks += extra

    if t.is_large_team:
        weeks *= tp.large_team_factor
        weeks += tp.large_team_overhead
    elif t.is_medium_team:
        weeks *= tp.medium_team_factor
        weeks += tp.medium_team_overhead

    return max(1, math.ceil(weeks))


def _category(weeks: int, tp: TimelinePolicy) -> Tuple[str, str, List[str], List[str]]:
    """Category, description, recommendations and risks for the week count."""
    if weeks <= tp.short_term_max:
        return (
            "Short-term",
            "Quick development cycle suitable for MVP or simple applications",
            ["Focus on core features only", "Consider using existing templates or frameworks"],
            [],
        )
    if weeks <= tp.medium_term_max:
        return (
            "Medium-term",
            "Standard development timeline with room for proper planning and testing",
            ["Implement features in phases", "Plan for regular testing and feedback cycles"],
            [],
        )
    if weeks <= tp.long_term_max:
        return (
            "Long-term",
            "Extended development period allowing for complex features and thorough testing",
            ["Break project into multiple milestones", "Consider agile development methodology"],
            ["Scope creep risk", "Technology changes during development"],
        )
    return (
        "Enterprise-scale",
        "Large-scale project requiring careful planning and project management",
        [
            "Implement robust project management practices",
            "Consider hiring additional team members",
            "Plan for multiple release cycles",
        ],
        ["High complexity management", "Team coordination challenges", "Budget overrun risk"],
    )


def estimate_timeline(
    req: ProjectRequirements,
    traits: Optional[ProjectTraits] = None,
    policy: EnginePolicy = engine_policy,
) -> TimelineEstimate:
    """Estimate duration, breakdown, milestones and risks for the requirements."""
    t = traits or ProjectTraits.from_requirements(req, policy)
    tp = policy.timeline

    weeks = estimate_weeks(req, t, policy)
    months = math.ceil(weeks / tp.weeks_per_month)

    category, description, recommendations, risks = _category(weeks, tp)

    if t.is_beginner:
        risks.append("Learning curve may extend timeline")
        recommendations.append("Allocate extra time for learning and debugging")
    if t.has_ml:
        risks += ["Model training time uncertainty", "Data quality issues"]
    if t.has_gaming:
        risks += ["Performance optimization challenges", "Platform compatibility issues"]
    if t.has_payments:
        risks += ["Compliance and security requirements", "Third-party integration delays"]

    return TimelineEstimate(
        estimated=EstimatedDuration(
            weeks=weeks,
            months=months,
            working_days=weeks * tp.working_days_per_week,
            range=TimelineRange(
                minimum=f"{max(1, weeks - tp.range_min_slack)} weeks",
                maximum=f"{weeks + tp.range_max_slack} weeks",
                realistic=f"{weeks} weeks",
            ),
        ),
        category=category,
        description=description,
        breakdown=TimelineBreakdown(
            planning=math.ceil(weeks * tp.planning_share),
            development=math.ceil(weeks * tp.development_share),
            testing=math.ceil(weeks * tp.testing_share),
            deployment=math.ceil(weeks * tp.deployment_share),
        ),
        milestones=[
            TimelineMilestone(name="Project Kickoff", week=1, description="Project setup and planning complete"),
            TimelineMilestone(
                name="MVP Ready",
                week=math.ceil(weeks * tp.mvp_share),
                description="Core features implemented and testable",
            ),
            TimelineMilestone(
                name="Beta Release",
                week=math.ceil(weeks * tp.beta_share),
                description="Feature-complete version ready for testing",
            ),
            TimelineMilestone(name="Production Launch", week=weeks, description="Final version deployed and live"),
        ],
        risk_factors=risks,
        recommendations=recommendations,
        buffer_time=BufferTime(
            recommended=f"{math.ceil(weeks * tp.buffer_share)} weeks",
            reason=BUFFER_REASON,
        ),
    )
