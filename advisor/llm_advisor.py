"""LLM-backed recommendation path with rule-engine fallback.

The advisor asks a provider for the full report as JSON. Sections that
come back valid are kept; anything missing or malformed is filled from
the rule engine so callers always receive a complete ``Recommendation``.
If the provider cannot be reached at all, the engine answers alone and
``metadata.provider`` is set to ``"fallback"``.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import TypeAdapter, ValidationError

from config import settings
from contracts import ProjectRequirements, Recommendation, RecommendationMetadata
from engine import (
    FALLBACK_PROVIDER,
    LLMResponseError,
    apply_free_override,
    generate_recommendation,
    utc_now,
)
from engine.policy import EnginePolicy, engine_policy
from engine.recommender import Clock
from providers import LLMProvider, get_provider

from .prompts import SYSTEM_PROMPT, build_prompt

logger = logging.getLogger(__name__)

# One validator per top-level report section, keyed by the camelCase wire name
SECTION_ADAPTERS: Dict[str, tuple] = {
    (field.alias or name): (name, TypeAdapter(field.annotation))
    for name, field in Recommendation.model_fields.items()
    if name != "metadata"
}


def extract_json(text: str) -> Dict[str, Any]:
    """Pull the JSON object out of an LLM reply.

    Handles fenced ```json blocks and prose around a bare object.

    Raises:
        LLMResponseError: No JSON object could be parsed.
    """
    raw = text or ""
    text = raw.strip()

    # Handle markdown code blocks; an unclosed fence runs to the end
    fence = "```json" if "```json" in text else "```"
    if fence in text:
        start = text.find(fence) + len(fence)
        end = text.find("```", start)
        text = text[start:] if end == -1 else text[start:end]

    # Narrow to the outermost braces, dropping prose on either side
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        raise LLMResponseError("No JSON found in response", raw_response=raw)
    text = text[start:end + 1]

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"Invalid JSON in response: {e}", raw_response=raw) from e

    if not isinstance(data, dict):
        raise LLMResponseError("Response JSON is not an object", raw_response=raw)
    return data


def merge_sections(data: Dict[str, Any], engine_rec: Recommendation) -> Dict[str, Any]:
    """Validate each LLM section, keeping the engine's version where it fails.

    Returns field-name keyed values ready for ``Recommendation(...)``.
    """
    merged = {}
    for key, (name, adapter) in SECTION_ADAPTERS.items():
        fallback_value = getattr(engine_rec, name)
        if key not in data or data[key] is None:
            merged[name] = fallback_value
            continue
        try:
            value = adapter.validate_python(data[key])
        except ValidationError as e:
            logger.warning("LLM section %s invalid, using rule engine: %s", key, e.error_count())
            merged[name] = fallback_value
            continue
        # An empty roadmap is never acceptable
        if name == "roadmap" and not value:
            value = fallback_value
        merged[name] = value
    return merged


class LLMAdvisor:
    """Recommendation path that calls one LLM provider."""

    def __init__(
        self,
        provider: Union[str, LLMProvider],
        clock: Clock = utc_now,
        policy: EnginePolicy = engine_policy,
    ):
        """Initialize the advisor.

        Args:
            provider: Provider instance or registered name (openai, gemini)
            clock: Source of ``metadata.generatedAt``
            policy: Rule engine thresholds used for fallback and gap filling
        """
        self.provider = get_provider(provider) if isinstance(provider, str) else provider
        self.clock = clock
        self.policy = policy

    def _fallback(self, req: ProjectRequirements, reason: str) -> Recommendation:
        logger.warning(
            "%s unavailable for %r, using rule engine: %s",
            self.provider.name, req.project_name, reason,
        )
        return generate_recommendation(
            req, provider=FALLBACK_PROVIDER, clock=self.clock, fallback_reason=reason,
            policy=self.policy,
        )

    def recommend(self, req: ProjectRequirements, model: Optional[str] = None) -> Recommendation:
        """Ask the provider for a recommendation. Never raises provider errors."""
        if not self.provider.is_available():
            return self._fallback(req, f"{self.provider.display_name} API key not configured")

        try:
            response = self.provider.complete(
                system_prompt=SYSTEM_PROMPT,
                user_message=build_prompt(req),
                model=model,
                max_tokens=settings.max_tokens,
                temperature=settings.temperature,
                json_mode=True,
                timeout=settings.llm_timeout_seconds,
            )
        except Exception as e:
            return self._fallback(req, f"{type(e).__name__}: {e}")

        try:
            data = extract_json(response.content)
        except LLMResponseError as e:
            return self._fallback(req, str(e))

        engine_rec = generate_recommendation(req, clock=self.clock, policy=self.policy)
        sections = merge_sections(data, engine_rec)

        rec = Recommendation(
            **sections,
            metadata=RecommendationMetadata(
                provider=self.provider.name,
                model=response.model,
                generated_at=self.clock(),
                project_name=req.project_name,
                project_type=req.development_type,
            ),
        )
        logger.info(
            "%s recommendation for %r (%d in / %d out tokens)",
            self.provider.name, req.project_name, response.input_tokens, response.output_tokens,
        )
        return apply_free_override(rec, req.budget)
