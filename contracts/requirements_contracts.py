"""Project requirement contracts and the fixed input vocabularies."""

from enum import Enum
from typing import Any, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Currency(str, Enum):
    """Currency the budget labels and cost tables are written in."""
    INR = "INR"
    USD = "USD"


class DevelopmentType(str, Enum):
    """What the project has to deliver."""
    FRONTEND_ONLY = "Frontend Only"
    BACKEND_ONLY = "Backend Only"
    FULL_STACK = "Full Stack (Both Frontend & Backend)"
    WEB_APPLICATION = "Web Application"
    MOBILE_APP = "Mobile App"
    DESKTOP_APPLICATION = "Desktop Application"


class TeamSize(str, Enum):
    """Team size buckets offered by the project form."""
    SOLO = "Solo (1 person)"
    SMALL = "Small team (2-5 people)"
    MEDIUM = "Medium team (6-15 people)"
    LARGE = "Large team (16+ people)"


class Experience(str, Enum):
    """Experience level of the team."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Feature(str, Enum):
    """Feature tags understood by the recommendation rules."""
    USER_AUTHENTICATION = "User Authentication"
    REAL_TIME_UPDATES = "Real-time Updates"
    PAYMENT_PROCESSING = "Payment Processing"
    FILE_UPLOAD_STORAGE = "File Upload/Storage"
    SEARCH_FUNCTIONALITY = "Search Functionality"
    ANALYTICS_REPORTING = "Analytics/Reporting"
    SOCIAL_MEDIA_INTEGRATION = "Social Media Integration"
    EMAIL_NOTIFICATIONS = "Email Notifications"
    MULTI_LANGUAGE_SUPPORT = "Multi-language Support"
    OFFLINE_FUNCTIONALITY = "Offline Functionality"
    PUSH_NOTIFICATIONS = "Push Notifications"
    THIRD_PARTY_INTEGRATIONS = "Third-party Integrations"
    ADMIN_DASHBOARD = "Admin Dashboard"
    API_DEVELOPMENT = "API Development"
    DATABASE_MANAGEMENT = "Database Management"
    MOBILE_RESPONSIVE_DESIGN = "Mobile Responsive Design"
    SEO_OPTIMIZATION = "SEO Optimization"
    CONTENT_MANAGEMENT = "Content Management"
    E_COMMERCE_FEATURES = "E-commerce Features"
    DATA_VISUALIZATION = "Data Visualization"
    MACHINE_LEARNING = "Machine Learning"
    AUTOMATED_TESTING = "Automated Testing"
    PERFORMANCE_OPTIMIZATION = "Performance Optimization"
    # Tested by the rules but not offered on the checklist
    GAMING = "Gaming"
    DATA_PROCESSING = "Data Processing"
    HIGH_PERFORMANCE = "High Performance"
    SYSTEM_INTEGRATION = "System Integration"


FEATURE_VOCABULARY = frozenset(f.value for f in Feature)

BUDGET_LABELS = {
    Currency.INR: (
        "Free",
        "Under ₹1,00,000",
        "₹1,00,000 - ₹3,00,000",
        "₹3,00,000 - ₹6,00,000",
        "₹6,00,000 - ₹10,00,000",
        "Over ₹10,00,000",
    ),
    Currency.USD: (
        "Free",
        "Under $5,000",
        "$5,000 - $15,000",
        "$15,000 - $50,000",
        "$50,000 - $100,000",
        "Over $100,000",
    ),
}

CURRENCY_SYMBOLS = {
    Currency.INR: "₹",
    Currency.USD: "$",
}

TIMELINE_LABELS = (
    "Less than 1 month",
    "1-2 months",
    "3-6 months",
    "6-12 months",
    "More than 1 year",
    "Over 1 year",
)


class ProjectRequirements(BaseModel):
    """Requirements collected from the user for one recommendation.

    Accepts the camelCase keys sent by the web client (``projectName``,
    ``developmentType`` / ``projectType``, ``teamSize``) as well as the
    snake_case field names. Label fields are plain strings so that labels
    outside the vocabulary still reach the default rule branches.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    project_name: str = Field(default="Untitled Project", description="Display only")
    development_type: str = Field(
        ...,
        validation_alias=AliasChoices(
            "developmentType", "projectType", "development_type", "project_type"
        ),
        serialization_alias="developmentType",
        description="e.g. Frontend Only, Backend Only, Mobile App",
    )
    description: str = Field(default="", description="Free text, not used by the rules")
    budget: str = Field(..., description="Budget range label, e.g. 'Under ₹1,00,000'")
    currency: Currency = Field(
        default=Currency.INR,
        description="Currency of the budget label; inferred from the label when omitted",
    )
    timeline: str = Field(default="", description="Timeline bucket, e.g. '3-6 months'")
    team_size: str = Field(..., description="Team size label, e.g. 'Solo (1 person)'")
    experience: str = Field(..., description="Beginner, Intermediate, Advanced or Expert")
    features: Tuple[str, ...] = Field(default=(), description="Feature tags, membership semantics")

    @model_validator(mode="before")
    @classmethod
    def infer_currency(cls, data: Any) -> Any:
        """Derive the currency from the budget label's symbol when it is not given."""
        if not isinstance(data, dict) or data.get("currency"):
            return data
        budget = data.get("budget") or ""
        inferred = Currency.USD if CURRENCY_SYMBOLS[Currency.USD] in budget else Currency.INR
        return {**data, "currency": inferred}

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("features", mode="before")
    @classmethod
    def coerce_features(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @property
    def feature_count(self) -> int:
        return len(self.features)

    def has_feature(self, *tags: str) -> bool:
        """True if any of the given tags was selected."""
        return any(tag in self.features for tag in tags)
