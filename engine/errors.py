"""Custom error types for the recommendation engine and its callers."""


class StackAdvisorError(Exception):
    """Base error for Stack Advisor operations."""
    pass


class RequirementsError(StackAdvisorError, ValueError):
    """Project requirements failed boundary validation."""

    def __init__(self, message: str, field: str = None, value: str = None):
        super().__init__(message)
        self.field = field
        self.value = value


class CurrencyBudgetMismatch(RequirementsError):
    """Budget label is written in a different currency than the one selected."""

    def __init__(self, budget: str, currency: str):
        super().__init__(
            f"Budget '{budget}' does not match currency {currency}",
            field="budget",
            value=budget,
        )
        self.currency = currency


class InvalidFeatureTag(RequirementsError):
    """Feature tag outside the known vocabulary."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown feature tag: {tag!r}", field="features", value=tag)


class InvalidTeamSizeLabel(RequirementsError):
    """Team size label outside the known list."""

    def __init__(self, label: str):
        super().__init__(f"Unknown team size label: {label!r}", field="teamSize", value=label)


class InvalidExperienceLabel(RequirementsError):
    """Experience label outside Beginner/Intermediate/Advanced/Expert."""

    def __init__(self, label: str):
        super().__init__(f"Unknown experience label: {label!r}", field="experience", value=label)


class InvalidDevelopmentType(RequirementsError):
    """Development type outside the known list."""

    def __init__(self, label: str):
        super().__init__(
            f"Unknown development type: {label!r}", field="developmentType", value=label
        )


class UnknownProviderError(StackAdvisorError, ValueError):
    """Requested recommendation provider is not registered."""

    def __init__(self, name: str, available: list = None):
        available = available or []
        super().__init__(f"Unknown provider: {name}. Available: {available}")
        self.name = name
        self.available = available


class LLMResponseError(StackAdvisorError):
    """LLM reply could not be turned into a recommendation."""

    def __init__(self, message: str, raw_response: str = None):
        super().__init__(message)
        self.raw_response = raw_response
