"""Top-level merge of the rule engine sub-functions into one Recommendation."""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from contracts import (
    CommunityInsights,
    FrontendRecommendation,
    BackendRecommendation,
    ProjectRequirements,
    Recommendation,
    RecommendationMetadata,
    Resource,
)
from engine.backend import select_backend
from engine.cost import FREE_COST, estimate_cost, is_free_budget
from engine.devtools import select_devtools
from engine.frontend import select_frontend
from engine.policy import EnginePolicy, engine_policy
from engine.roadmap import generate_roadmap
from engine.timeline import estimate_timeline
from engine.traits import ProjectTraits

logger = logging.getLogger(__name__)

LOCAL_PROVIDER = "local"
FALLBACK_PROVIDER = "fallback"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def apply_free_override(rec: Recommendation, budget: str) -> Recommendation:
    """Replace the cost estimate with the fixed free strings when the budget is Free."""
    if not is_free_budget(budget):
        return rec
    return rec.model_copy(update={"estimated_cost": FREE_COST.model_copy()})


def default_resources(frontend: FrontendRecommendation, backend: BackendRecommendation):
    return [
        Resource(
            name=f"{frontend.primary} Documentation",
            description=f"Official documentation for {frontend.primary}",
        ),
        Resource(
            name=f"{backend.primary} Tutorial",
            description=f"Getting started with {backend.primary}",
        ),
    ]


def generate_recommendation(
    req: ProjectRequirements,
    *,
    provider: str = LOCAL_PROVIDER,
    clock: Clock = utc_now,
    fallback_reason: Optional[str] = None,
    policy: EnginePolicy = engine_policy,
) -> Recommendation:
    """Produce a complete recommendation from the rule tables.

    Pure apart from ``clock``: identical requirements, clock and policy give
    identical output. ``policy`` reaches every sub-function through the
    derived traits and the timeline constants.
    """
    traits = ProjectTraits.from_requirements(req, policy)

    frontend = select_frontend(req, traits)
    backend = select_backend(req, traits)

    rec = Recommendation(
        frontend=frontend,
        backend=backend,
        dev_tools=select_devtools(req, traits),
        estimated_cost=estimate_cost(req.budget, req.currency),
        timeline=estimate_timeline(req, traits, policy),
        roadmap=generate_roadmap(req, traits),
        resources=default_resources(frontend, backend),
        community_insights=CommunityInsights(),
        metadata=RecommendationMetadata(
            provider=provider,
            generated_at=clock(),
            project_name=req.project_name,
            project_type=req.development_type,
            fallback_reason=fallback_reason,
        ),
    )

    logger.debug(
        "Engine recommendation for %r: frontend=%s backend=%s weeks=%d",
        req.project_name,
        frontend.primary,
        backend.primary,
        rec.timeline.estimated.weeks,
    )
    return apply_free_override(rec, req.budget)
