"""LLM advisor and the strategy-selecting recommendation service."""

from .prompts import SYSTEM_PROMPT, build_prompt
from .llm_advisor import LLMAdvisor, extract_json, merge_sections
from .service import (
    ComparisonResult,
    DEFAULT_COMPARE_PROVIDERS,
    RecommendationService,
    strategy_names,
)

__all__ = [
    "SYSTEM_PROMPT",
    "build_prompt",
    "LLMAdvisor",
    "extract_json",
    "merge_sections",
    "ComparisonResult",
    "DEFAULT_COMPARE_PROVIDERS",
    "RecommendationService",
    "strategy_names",
]
