"""Single entry point that picks a recommendation strategy per call.

``provider`` is an explicit argument: ``"local"`` runs the rule engine
directly, any registered LLM provider name goes through ``LLMAdvisor``.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from config import settings
from contracts import ProjectRequirements, Recommendation
from engine import (
    LOCAL_PROVIDER,
    RequirementsError,
    UnknownProviderError,
    generate_recommendation,
    utc_now,
    validate_requirements,
)
from engine.policy import EnginePolicy, engine_policy
from engine.recommender import Clock
from providers import get_provider, provider_names

from .llm_advisor import LLMAdvisor

logger = logging.getLogger(__name__)

DEFAULT_COMPARE_PROVIDERS = ("openai", "gemini")


@dataclass
class ComparisonResult:
    """Per-provider outcome of a comparison run."""
    results: Dict[str, Recommendation] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.results)


def strategy_names() -> List[str]:
    """Every value accepted as ``provider``."""
    return [LOCAL_PROVIDER] + provider_names()


class RecommendationService:
    """Validates requirements and routes them to the chosen strategy."""

    def __init__(
        self,
        default_provider: Optional[str] = None,
        strict: Optional[bool] = None,
        clock: Clock = utc_now,
        policy: EnginePolicy = engine_policy,
    ):
        self.default_provider = (default_provider or settings.default_provider).lower()
        self.strict = settings.strict_validation if strict is None else strict
        self.clock = clock
        self.policy = policy

    def validate(self, req: ProjectRequirements) -> List[RequirementsError]:
        return validate_requirements(req, strict=self.strict, policy=self.policy)

    def _run(self, req: ProjectRequirements, name: str) -> Recommendation:
        if name == LOCAL_PROVIDER:
            return generate_recommendation(
                req, provider=LOCAL_PROVIDER, clock=self.clock, policy=self.policy,
            )
        return LLMAdvisor(get_provider(name), clock=self.clock, policy=self.policy).recommend(req)

    def generate(self, req: ProjectRequirements, provider: Optional[str] = None) -> Recommendation:
        """Produce one recommendation.

        Raises:
            UnknownProviderError: ``provider`` is neither "local" nor registered.
            CurrencyBudgetMismatch: Budget label and currency disagree.
            RequirementsError: Unknown label, only in strict mode.
        """
        name = (provider or self.default_provider).lower()
        if name not in strategy_names():
            raise UnknownProviderError(name, strategy_names())

        self.validate(req)
        logger.info("Generating recommendation for %r using %s", req.project_name, name)
        return self._run(req, name)

    def compare(
        self,
        req: ProjectRequirements,
        providers: Optional[Sequence[str]] = None,
    ) -> ComparisonResult:
        """Run several strategies in parallel and collect results and errors per name.

        Validation errors are raised before any provider is called.
        """
        names = [p.lower() for p in (providers or DEFAULT_COMPARE_PROVIDERS)]
        self.validate(req)

        outcome = ComparisonResult()
        known = strategy_names()
        runnable = []
        for name in names:
            if name in known:
                runnable.append(name)
            else:
                outcome.errors[name] = f"Unsupported provider: {name}"

        if not runnable:
            return outcome

        logger.info("Comparing %s for %r", ", ".join(runnable), req.project_name)
        with ThreadPoolExecutor(max_workers=len(runnable)) as executor:
            futures = {executor.submit(self._run, req, name): name for name in runnable}
            for future in as_completed(futures):
                name = futures[future]
                try:
                    outcome.results[name] = future.result()
                except Exception as e:
                    logger.error("Error with %s: %s", name, e)
                    outcome.errors[name] = str(e)

        return outcome
