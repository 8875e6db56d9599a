"""Pydantic contracts for Stack Advisor.

The requirements record going in and the recommendation report coming out
are typed through these contracts, whichever path produced the report.
"""

from .requirements_contracts import (
    Currency,
    DevelopmentType,
    TeamSize,
    Experience,
    Feature,
    FEATURE_VOCABULARY,
    BUDGET_LABELS,
    CURRENCY_SYMBOLS,
    TIMELINE_LABELS,
    ProjectRequirements,
)

from .recommendation_contracts import (
    CamelModel,
    FrontendRecommendation,
    BackendRecommendation,
    DevTools,
    CostEstimate,
    TimelineRange,
    EstimatedDuration,
    TimelineBreakdown,
    TimelineMilestone,
    BufferTime,
    TimelineEstimate,
    RoadmapPhase,
    Resource,
    GithubTemplate,
    IntegrationWarning,
    CommunityInsights,
    RecommendationMetadata,
    Recommendation,
)

__all__ = [
    # Requirements
    "Currency",
    "DevelopmentType",
    "TeamSize",
    "Experience",
    "Feature",
    "FEATURE_VOCABULARY",
    "BUDGET_LABELS",
    "CURRENCY_SYMBOLS",
    "TIMELINE_LABELS",
    "ProjectRequirements",
    # Recommendation
    "CamelModel",
    "FrontendRecommendation",
    "BackendRecommendation",
    "DevTools",
    "CostEstimate",
    "TimelineRange",
    "EstimatedDuration",
    "TimelineBreakdown",
    "TimelineMilestone",
    "BufferTime",
    "TimelineEstimate",
    "RoadmapPhase",
    "Resource",
    "GithubTemplate",
    "IntegrationWarning",
    "CommunityInsights",
    "RecommendationMetadata",
    "Recommendation",
]
