"""Recommendation router: generate, compare and list providers."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from advisor import RecommendationService
from contracts import ProjectRequirements
from engine import LOCAL_PROVIDER, RequirementsError, UnknownProviderError
from providers import list_providers
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

_service = RecommendationService()


def get_service() -> RecommendationService:
    return _service


class RecommendationRequest(ProjectRequirements):
    """Requirements plus the provider the client asked for."""
    ai_provider: Optional[str] = Field(default=None, description="local, openai or gemini")


class CompareRequest(ProjectRequirements):
    providers: Optional[List[str]] = Field(default=None, description="Defaults to openai and gemini")


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.post("/recommendations")
def create_recommendation(
    body: RecommendationRequest,
    service: RecommendationService = Depends(get_service),
):
    """Generate one recommendation with the requested provider."""
    provider = (body.ai_provider or service.default_provider).lower()
    try:
        rec = service.generate(body, provider)
    except UnknownProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RequirementsError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "success": True,
        "provider": provider,
        "data": rec.to_wire(),
        "timestamp": _timestamp(),
    }


@router.post("/recommendations/compare")
def compare_recommendations(
    body: CompareRequest,
    service: RecommendationService = Depends(get_service),
):
    """Generate recommendations from several providers side by side."""
    try:
        outcome = service.compare(body, body.providers)
    except RequirementsError as e:
        raise HTTPException(status_code=422, detail=str(e))

    response = {
        "success": outcome.success,
        "results": {name: rec.to_wire() for name, rec in outcome.results.items()},
        "timestamp": _timestamp(),
    }
    if outcome.errors:
        response["errors"] = outcome.errors
    return response


@router.get("/providers")
def get_providers():
    """Available recommendation providers and their status."""
    providers = {
        LOCAL_PROVIDER: {"name": "Rule engine", "available": True, "model": None},
        **list_providers(),
    }
    return {
        "providers": providers,
        "defaultProvider": settings.default_provider,
        "timestamp": _timestamp(),
    }
