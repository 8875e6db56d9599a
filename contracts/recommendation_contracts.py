"""Recommendation contracts: the report produced for one set of requirements.

Every model serialises with camelCase aliases so the LLM path and the rule
engine produce the same wire shape.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrontendRecommendation(CamelModel):
    primary: str = Field(..., description="Recommended frontend framework")
    reasoning: str = Field(..., description="Why this framework fits")
    libraries: List[str] = Field(default_factory=list)


class BackendRecommendation(CamelModel):
    primary: str = Field(..., description="Recommended backend technology")
    database: str = Field(..., description="Recommended database")
    reasoning: str = Field(..., description="Why this backend fits")


class DevTools(CamelModel):
    version_control: str = Field(default="Git")
    deployment: str = Field(...)
    cicd: str = Field(...)


class CostEstimate(CamelModel):
    """Human-readable cost ranges. Never partially populated."""
    development: str = Field(..., min_length=1)
    hosting: str = Field(..., min_length=1)
    third_party: str = Field(..., min_length=1)


class TimelineRange(CamelModel):
    minimum: str
    maximum: str
    realistic: str


class EstimatedDuration(CamelModel):
    weeks: int = Field(..., ge=1)
    months: int = Field(..., ge=1)
    working_days: int = Field(default=0, ge=0)
    range: TimelineRange


class TimelineBreakdown(CamelModel):
    """Weeks per stage. Each part is rounded up independently."""
    planning: int = Field(..., ge=0)
    development: int = Field(..., ge=0)
    testing: int = Field(..., ge=0)
    deployment: int = Field(..., ge=0)


class TimelineMilestone(CamelModel):
    name: str
    week: int = Field(..., ge=1)
    description: str


class BufferTime(CamelModel):
    recommended: str
    reason: str


class TimelineEstimate(CamelModel):
    estimated: EstimatedDuration
    category: str = Field(..., description="Short-term, Medium-term, Long-term or Enterprise-scale")
    description: str
    breakdown: TimelineBreakdown
    milestones: List[TimelineMilestone] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    buffer_time: Optional[BufferTime] = None


class RoadmapPhase(CamelModel):
    phase: str
    duration: str
    tasks: List[str] = Field(default_factory=list)
    deliverables: List[str] = Field(default_factory=list)


class Resource(CamelModel):
    name: str
    description: str
    url: str = "#"


class GithubTemplate(CamelModel):
    name: str
    description: str
    url: str


class IntegrationWarning(CamelModel):
    tools: List[str] = Field(default_factory=list)
    issue: str
    solution: str


class CommunityInsights(CamelModel):
    popularity: str = Field(default="High", description="High/Medium/Low")
    market_demand: str = Field(default="Growing", description="Growing/Stable/Declining")
    trending_alternatives: List[str] = Field(default_factory=list)


class RecommendationMetadata(CamelModel):
    provider: str = Field(..., description="'local', 'fallback' or the LLM provider name")
    model: Optional[str] = None
    generated_at: datetime
    project_name: str
    project_type: str
    fallback_reason: Optional[str] = Field(
        default=None,
        description="Why the rule engine answered instead of the LLM",
    )


class Recommendation(CamelModel):
    """Complete technology stack recommendation report."""
    frontend: FrontendRecommendation
    backend: BackendRecommendation
    dev_tools: DevTools
    estimated_cost: CostEstimate
    timeline: TimelineEstimate
    roadmap: List[RoadmapPhase] = Field(..., min_length=1)
    resources: List[Resource] = Field(default_factory=list)
    github_templates: List[GithubTemplate] = Field(default_factory=list)
    integration_warnings: List[IntegrationWarning] = Field(default_factory=list)
    community_insights: CommunityInsights = Field(default_factory=CommunityInsights)
    metadata: RecommendationMetadata

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_markdown(self) -> str:
        """Convert the recommendation to a human-readable markdown report."""
        est = self.timeline.estimated
        sections = [
            f"# Tech Stack Recommendation: {self.metadata.project_name}",
            f"\n**Project type:** {self.metadata.project_type}",
            f"**Generated by:** {self.metadata.provider}",
            f"**Date:** {self.metadata.generated_at.strftime('%Y-%m-%d')}",
            "\n---\n",
            "## Frontend",
            f"\n**{self.frontend.primary}**: {self.frontend.reasoning}",
            *[f"- {lib}" for lib in self.frontend.libraries],
            "\n## Backend",
            f"\n**{self.backend.primary}** with {self.backend.database}: {self.backend.reasoning}",
            "\n## Dev Tools",
            f"- Version control: {self.dev_tools.version_control}",
            f"- Deployment: {self.dev_tools.deployment}",
            f"- CI/CD: {self.dev_tools.cicd}",
            "\n## Estimated Cost",
            f"- Development: {self.estimated_cost.development}",
            f"- Hosting: {self.estimated_cost.hosting}",
            f"- Third party: {self.estimated_cost.third_party}",
            "\n## Timeline",
            f"\n**{self.timeline.category}**, {est.weeks} weeks "
            f"({est.range.minimum} to {est.range.maximum}). {self.timeline.description}",
        ]

        if self.timeline.milestones:
            sections.append("\n### Milestones")
            sections.extend(
                f"- Week {m.week}: **{m.name}** ({m.description})" for m in self.timeline.milestones
            )

        if self.timeline.risk_factors:
            sections.append("\n### Risk Factors")
            sections.extend(f"- {r}" for r in self.timeline.risk_factors)

        sections.append("\n## Roadmap")
        for i, phase in enumerate(self.roadmap, 1):
            sections.append(f"\n### {i}. {phase.phase} ({phase.duration})")
            sections.extend(f"- {t}" for t in phase.tasks)
            if phase.deliverables:
                sections.append(f"\n*Deliverables:* {', '.join(phase.deliverables)}")

        return "\n".join(sections)
