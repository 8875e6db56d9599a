"""Boolean traits derived once from the requirements and shared by every rule table."""

from dataclasses import dataclass

from contracts import DevelopmentType, Experience, Feature, ProjectRequirements
from engine.policy import EnginePolicy, engine_policy


@dataclass(frozen=True)
class ProjectTraits:
    """Predicates the rule tables test. Field names read as questions."""
    experience: str
    feature_count: int

    # Delivery target
    is_backend_only: bool
    is_frontend_only: bool
    is_mobile_target: bool
    is_desktop_target: bool

    # Experience
    is_beginner: bool
    is_intermediate: bool
    is_advanced: bool
    is_expert: bool

    # Budget, team, schedule
    is_free: bool
    is_low_budget: bool
    is_large_team: bool
    is_medium_team: bool
    is_complex: bool
    is_simple: bool
    is_short_timeline: bool
    is_long_timeline: bool

    # Individual tags
    has_auth: bool
    has_payments: bool
    has_realtime: bool
    has_file_storage: bool
    has_ml: bool
    has_data_processing: bool
    has_gaming: bool
    has_high_performance: bool
    has_system_integration: bool
    has_seo: bool
    has_cms: bool
    has_api: bool
    has_admin: bool
    has_analytics: bool
    has_automated_testing: bool

    @property
    def is_web_target(self) -> bool:
        return not self.is_mobile_target and not self.is_desktop_target

    @property
    def is_advanced_or_expert(self) -> bool:
        return self.is_advanced or self.is_expert

    @property
    def needs_seo(self) -> bool:
        """SEO or content management."""
        return self.has_seo or self.has_cms

    @property
    def needs_data_work(self) -> bool:
        """Data processing or machine learning."""
        return self.has_data_processing or self.has_ml

    @property
    def needs_performance(self) -> bool:
        """Frontend notion: high performance or data processing."""
        return self.has_high_performance or self.has_data_processing

    @property
    def needs_high_performance(self) -> bool:
        """Backend notion: high performance or gaming."""
        return self.has_high_performance or self.has_gaming

    @property
    def is_static_content(self) -> bool:
        return (
            self.needs_seo
            and not self.has_auth
            and not self.has_payments
            and not self.has_realtime
            and not self.needs_data_work
        )

    @classmethod
    def from_requirements(
        cls,
        req: ProjectRequirements,
        policy: EnginePolicy = engine_policy,
    ) -> "ProjectTraits":
        has = req.has_feature
        count = req.feature_count
        return cls(
            experience=req.experience,
            feature_count=count,
            is_backend_only=req.development_type == DevelopmentType.BACKEND_ONLY,
            is_frontend_only=req.development_type == DevelopmentType.FRONTEND_ONLY,
            is_mobile_target=req.development_type == DevelopmentType.MOBILE_APP,
            is_desktop_target=req.development_type == DevelopmentType.DESKTOP_APPLICATION,
            is_beginner=req.experience == Experience.BEGINNER,
            is_intermediate=req.experience == Experience.INTERMEDIATE,
            is_advanced=req.experience == Experience.ADVANCED,
            is_expert=req.experience == Experience.EXPERT,
            is_free=policy.budget.free_marker in req.budget,
            is_low_budget=any(m in req.budget for m in policy.budget.low_budget_markers),
            is_large_team=req.team_size in policy.teams.large_team_labels,
            is_medium_team=req.team_size in policy.teams.medium_team_labels,
            is_complex=count > policy.complexity.complex_above,
            is_simple=count <= policy.complexity.simple_at_most,
            is_short_timeline=req.timeline in policy.schedule.short_timeline_labels,
            is_long_timeline=req.timeline in policy.schedule.long_timeline_labels,
            has_auth=has(Feature.USER_AUTHENTICATION),
            has_payments=has(Feature.PAYMENT_PROCESSING),
            has_realtime=has(Feature.REAL_TIME_UPDATES),
            has_file_storage=has(Feature.FILE_UPLOAD_STORAGE),
            has_ml=has(Feature.MACHINE_LEARNING),
            has_data_processing=has(Feature.DATA_PROCESSING),
            has_gaming=has(Feature.GAMING),
            has_high_performance=has(Feature.HIGH_PERFORMANCE),
            has_system_integration=has(Feature.SYSTEM_INTEGRATION),
            has_seo=has(Feature.SEO_OPTIMIZATION),
            has_cms=has(Feature.CONTENT_MANAGEMENT),
            has_api=has(Feature.API_DEVELOPMENT),
            has_admin=has(Feature.ADMIN_DASHBOARD),
            has_analytics=has(Feature.ANALYTICS_REPORTING),
            has_automated_testing=has(Feature.AUTOMATED_TESTING),
        )
