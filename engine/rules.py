"""Ordered (predicate, result) rule tables evaluated first-match-wins."""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from pydantic import BaseModel

from engine.traits import ProjectTraits

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Predicate = Callable[[ProjectTraits], bool]


def always(_traits: ProjectTraits) -> bool:
    """Predicate for the default row that closes every table."""
    return True


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One row of a rule table."""
    name: str
    predicate: Predicate
    result: T


def first_match(rules: Sequence[Rule[T]], traits: ProjectTraits) -> Rule[T]:
    """Return the first rule whose predicate holds.

    Tables end with an ``always`` row, so a miss means the table is broken.
    """
    for rule in rules:
        if rule.predicate(traits):
            return rule
    raise LookupError("Rule table has no default row")


def evaluate(rules: Sequence[Rule[T]], traits: ProjectTraits, table: str) -> T:
    """Pick the matching rule and return a fresh copy of its result."""
    rule = first_match(rules, traits)
    logger.debug("%s rule matched: %s", table, rule.name)
    return rule.result.model_copy(deep=True)
