"""Rule-based recommendation engine.

Pure functions over ``ProjectRequirements``. Used directly in local mode
and as the fallback whenever an LLM provider cannot answer.
"""

from .errors import (
    StackAdvisorError,
    RequirementsError,
    CurrencyBudgetMismatch,
    InvalidFeatureTag,
    InvalidTeamSizeLabel,
    InvalidExperienceLabel,
    InvalidDevelopmentType,
    UnknownProviderError,
    LLMResponseError,
)
from .policy import EnginePolicy, TimelinePolicy, engine_policy
from .traits import ProjectTraits
from .rules import Rule, first_match, evaluate
from .frontend import FRONTEND_RULES, select_frontend
from .backend import BACKEND_RULES, select_backend
from .cost import estimate_cost, check_currency_matches, FREE_COST
from .devtools import select_devtools
from .roadmap import generate_roadmap
from .timeline import estimate_timeline, estimate_weeks
from .validation import validate_requirements
from .recommender import (
    LOCAL_PROVIDER,
    FALLBACK_PROVIDER,
    apply_free_override,
    generate_recommendation,
    utc_now,
)

__all__ = [
    # Errors
    "StackAdvisorError",
    "RequirementsError",
    "CurrencyBudgetMismatch",
    "InvalidFeatureTag",
    "InvalidTeamSizeLabel",
    "InvalidExperienceLabel",
    "InvalidDevelopmentType",
    "UnknownProviderError",
    "LLMResponseError",
    # Policy and rules
    "EnginePolicy",
    "TimelinePolicy",
    "engine_policy",
    "ProjectTraits",
    "Rule",
    "first_match",
    "evaluate",
    "FRONTEND_RULES",
    "BACKEND_RULES",
    # Sub-functions
    "select_frontend",
    "select_backend",
    "select_devtools",
    "estimate_cost",
    "check_currency_matches",
    "FREE_COST",
    "generate_roadmap",
    "estimate_timeline",
    "estimate_weeks",
    "validate_requirements",
    # Entry point
    "LOCAL_PROVIDER",
    "FALLBACK_PROVIDER",
    "apply_free_override",
    "generate_recommendation",
    "utc_now",
]
