"""Boundary validation of project requirements.

The rule tables are permissive: unknown labels and tags simply fail to
match and fall through to the default rows. Validation reports them as
warnings (or raises in strict mode). A budget written in the other
currency is always an error because it would silently pick the wrong
cost tier.
"""

import logging
from typing import List

from contracts import DevelopmentType, Experience, FEATURE_VOCABULARY, ProjectRequirements
from engine.cost import check_currency_matches
from engine.errors import (
    InvalidDevelopmentType,
    InvalidExperienceLabel,
    InvalidFeatureTag,
    InvalidTeamSizeLabel,
    RequirementsError,
)
from engine.policy import EnginePolicy, engine_policy

logger = logging.getLogger(__name__)

_EXPERIENCE_LABELS = frozenset(e.value for e in Experience)
_DEVELOPMENT_TYPES = frozenset(d.value for d in DevelopmentType)


def find_label_issues(
    req: ProjectRequirements,
    policy: EnginePolicy = engine_policy,
) -> List[RequirementsError]:
    """Collect every out-of-vocabulary label and tag, in field order."""
    issues: List[RequirementsError] = []

    if req.development_type not in _DEVELOPMENT_TYPES:
        issues.append(InvalidDevelopmentType(req.development_type))
    teams = policy.teams
    known_teams = set(teams.known_labels) | set(teams.large_team_labels) | set(teams.medium_team_labels)
    if req.team_size not in known_teams:
        issues.append(InvalidTeamSizeLabel(req.team_size))
    if req.experience not in _EXPERIENCE_LABELS:
        issues.append(InvalidExperienceLabel(req.experience))
    for tag in req.features:
        if tag not in FEATURE_VOCABULARY:
            issues.append(InvalidFeatureTag(tag))

    return issues


def validate_requirements(
    req: ProjectRequirements,
    strict: bool = False,
    policy: EnginePolicy = engine_policy,
) -> List[RequirementsError]:
    """Validate requirements before they reach the engine.

    Args:
        req: Requirements to check.
        strict: Raise the first label issue instead of logging it.
        policy: Label lists to validate against.

    Returns:
        The label issues found (empty when everything is known).

    Raises:
        CurrencyBudgetMismatch: Budget label carries the other currency's symbol.
        RequirementsError: First label issue, only when ``strict`` is set.
    """
    check_currency_matches(req.budget, req.currency)

    issues = find_label_issues(req, policy)
    if issues and strict:
        raise issues[0]

    for issue in issues:
        logger.warning("%s (continuing with default rules)", issue)

    return issues
