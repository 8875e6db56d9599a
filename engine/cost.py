"""Cost estimator: budget label + currency -> development / hosting / third-party strings."""

from dataclasses import dataclass
from typing import Dict, Tuple

from contracts import CURRENCY_SYMBOLS, CostEstimate, Currency
from engine.errors import CurrencyBudgetMismatch
from engine.policy import engine_policy


@dataclass(frozen=True)
class CostTier:
    """One budget tier. ``markers`` are substrings of the budget labels that select it."""
    name: str
    markers: Tuple[str, ...]
    hosting: Dict[Currency, str]
    third_party: Dict[Currency, str]


# Checked in order; anything unmatched falls to HIGH_TIER
COST_TIERS: Tuple[CostTier, ...] = (
    CostTier(
        name="lowest",
        markers=("Under ₹1,00,000", "Under $5,000"),
        hosting={Currency.INR: "₹300 - ₹1,500", Currency.USD: "$5 - $30"},
        third_party={Currency.INR: "₹500 - ₹3,000", Currency.USD: "$10 - $60"},
    ),
    CostTier(
        name="low",
        markers=("₹1,00,000 - ₹3,00,000", "$5,000 - $15,000"),
        hosting={Currency.INR: "₹1,000 - ₹5,000", Currency.USD: "$20 - $100"},
        third_party={Currency.INR: "₹2,000 - ₹8,000", Currency.USD: "$40 - $150"},
    ),
    CostTier(
        name="mid",
        markers=("₹3,00,000 - ₹6,00,000", "$15,000 - $50,000"),
        hosting={Currency.INR: "₹3,000 - ₹15,000", Currency.USD: "$60 - $300"},
        third_party={Currency.INR: "₹5,000 - ₹20,000", Currency.USD: "$100 - $400"},
    ),
)

HIGH_TIER = CostTier(
    name="high",
    markers=(),
    hosting={Currency.INR: "₹10,000 - ₹50,000", Currency.USD: "$200 - $1,000"},
    third_party={Currency.INR: "₹15,000 - ₹75,000", Currency.USD: "$300 - $1,500"},
)

HIGH_TIER_DEFAULT_DEVELOPMENT = {
    Currency.INR: "₹10,00,000+",
    Currency.USD: "$100,000+",
}

FREE_COST = CostEstimate(
    development="Free (Self-developed)",
    hosting="Free (GitHub Pages, Netlify, Vercel, Railway free tier)",
    third_party="Free (Open source alternatives, free tiers of services)",
)


def is_free_budget(budget: str) -> bool:
    return engine_policy.budget.free_marker in (budget or "")


def check_currency_matches(budget: str, currency: str) -> None:
    """Raise CurrencyBudgetMismatch if the label carries another currency's symbol."""
    currency = Currency(currency)
    for other, symbol in CURRENCY_SYMBOLS.items():
        if other != currency and symbol in (budget or ""):
            raise CurrencyBudgetMismatch(budget, currency.value)


def match_tier(budget: str) -> CostTier:
    for tier in COST_TIERS:
        if any(marker in budget for marker in tier.markers):
            return tier
    return HIGH_TIER


def estimate_cost(budget: str, currency: str) -> CostEstimate:
    """Estimate development, hosting and third-party costs for a budget label.

    Free budgets get the fixed free strings. Otherwise ``development`` echoes
    the label and the monthly hosting and third-party ranges come from the
    matched tier in the requested currency.
    """
    budget = budget or ""
    if is_free_budget(budget):
        return FREE_COST.model_copy()

    check_currency_matches(budget, currency)
    currency = Currency(currency)
    tier = match_tier(budget)

    development = budget
    if tier is HIGH_TIER and not budget:
        development = HIGH_TIER_DEFAULT_DEVELOPMENT[currency]

    return CostEstimate(
        development=development,
        hosting=f"{tier.hosting[currency]}/month",
        third_party=f"{tier.third_party[currency]}/month",
    )
