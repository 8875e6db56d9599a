"""Tests for the timeline estimator."""

import itertools

import pytest

from engine import EnginePolicy, TimelinePolicy, estimate_timeline, estimate_weeks
from engine.timeline import BUFFER_REASON

NEUTRAL_TAGS = [
    "Search Functionality",
    "Email Notifications",
    "Push Notifications",
    "Offline Functionality",
    "Multi-language Support",
    "Social Media Integration",
    "Mobile Responsive Design",
]

WEIGHTED_TAGS = [
    "Machine Learning",
    "Gaming",
    "Payment Processing",
    "Real-time Updates",
    "System Integration",
    "Data Processing",
]


class TestEstimateWeeks:

    def test_simple_intermediate(self, req_factory):
        assert estimate_weeks(req_factory()) == 4

    def test_simple_beginner(self, req_factory):
        assert estimate_weeks(req_factory(experience="Beginner")) == 6

    def test_feature_weeks_added(self, req_factory):
        req = req_factory(features=["Payment Processing", "Real-time Updates"] + NEUTRAL_TAGS[:2])
        assert estimate_weeks(req) == 13

    def test_medium_team_scaling(self, req_factory):
        assert estimate_weeks(req_factory(team_size="Medium team (6-15 people)")) == 5

    def test_large_team_scaling(self, req_factory):
        req = req_factory(team_size="Large team (16+ people)", features=NEUTRAL_TAGS[:4])
        assert estimate_weeks(req) == 9

    def test_unknown_experience_uses_middle_column(self, req_factory):
        assert estimate_weeks(req_factory(experience="Guru", features=NEUTRAL_TAGS[:4])) == 9

    @pytest.mark.parametrize("tag", WEIGHTED_TAGS)
    def test_adding_tag_never_reduces_weeks(self, req_factory, tag):
        base = req_factory(features=NEUTRAL_TAGS[:3])
        more = req_factory(features=NEUTRAL_TAGS[:3] + [tag])
        assert estimate_weeks(more) >= estimate_weeks(base)

    def test_custom_policy(self, req_factory):
        policy = EnginePolicy(timeline=TimelinePolicy(simple_base=(1, 1, 1)))
        assert estimate_weeks(req_factory(), policy=policy) == 1


class TestCategories:

    @pytest.mark.parametrize("overrides,weeks,category", [
        ({}, 4, "Short-term"),
        ({"team_size": "Medium team (6-15 people)"}, 5, "Medium-term"),
        ({"experience": "Advanced", "features": NEUTRAL_TAGS}, 12, "Medium-term"),
        (
            {"features": ["Payment Processing", "Real-time Updates"] + NEUTRAL_TAGS[:2]},
            13,
            "Long-term",
        ),
        (
            {"experience": "Beginner", "features": ["Gaming", "Payment Processing"] + NEUTRAL_TAGS[:5]},
            24,
            "Long-term",
        ),
        (
            {"experience": "Beginner", "features": ["Gaming", "System Integration"] + NEUTRAL_TAGS[:5]},
            25,
            "Enterprise-scale",
        ),
    ])
    def test_boundaries(self, req_factory, overrides, weeks, category):
        timeline = estimate_timeline(req_factory(**overrides))
        assert timeline.estimated.weeks == weeks
        assert timeline.category == category

    def test_short_term_text(self, req_factory):
        timeline = estimate_timeline(req_factory())
        assert timeline.recommendations == [
            "Focus on core features only",
            "Consider using existing templates or frameworks",
        ]
        assert timeline.risk_factors == []

    def test_enterprise_risks(self, req_factory):
        req = req_factory(experience="Beginner", features=["Gaming", "System Integration"] + NEUTRAL_TAGS[:5])
        timeline = estimate_timeline(req)
        assert timeline.risk_factors[:3] == [
            "High complexity management",
            "Team coordination challenges",
            "Budget overrun risk",
        ]
        assert "Performance optimization challenges" in timeline.risk_factors


class TestDerivedFields:

    def test_four_week_project(self, req_factory):
        timeline = estimate_timeline(req_factory())
        est = timeline.estimated
        assert (est.weeks, est.months, est.working_days) == (4, 1, 20)
        assert est.range.minimum == "2 weeks"
        assert est.range.maximum == "8 weeks"
        assert est.range.realistic == "4 weeks"
        b = timeline.breakdown
        assert (b.planning, b.development, b.testing, b.deployment) == (1, 3, 1, 1)
        assert [m.week for m in timeline.milestones] == [1, 3, 4, 4]
        assert timeline.buffer_time.recommended == "1 weeks"
        assert timeline.buffer_time.reason == BUFFER_REASON

    def test_beginner_with_risky_features(self, req_factory):
        req = req_factory(
            experience="Beginner",
            features=["Machine Learning", "Payment Processing"] + NEUTRAL_TAGS[:6],
        )
        timeline = estimate_timeline(req)
        est = timeline.estimated
        assert est.weeks == 22
        assert est.months == 6
        assert est.working_days == 110
        assert timeline.category == "Long-term"
        assert timeline.risk_factors == [
            "Scope creep risk",
            "Technology changes during development",
            "Learning curve may extend timeline",
            "Model training time uncertainty",
            "Data quality issues",
            "Compliance and security requirements",
            "Third-party integration delays",
        ]
        assert timeline.recommendations[-1] == "Allocate extra time for learning and debugging"
        assert [m.week for m in timeline.milestones] == [1, 14, 19, 22]
        assert timeline.buffer_time.recommended == "5 weeks"

    def test_range_minimum_floor(self, req_factory):
        policy = EnginePolicy(timeline=TimelinePolicy(simple_base=(1, 1, 1)))
        timeline = estimate_timeline(req_factory(), policy=policy)
        assert timeline.estimated.range.minimum == "1 weeks"
        assert timeline.estimated.range.maximum == "5 weeks"
        assert [m.week for m in timeline.milestones] == [1, 1, 1, 1]

    def test_milestones_ordered_for_all_shapes(self, req_factory):
        experiences = ["Beginner", "Intermediate", "Advanced", "Expert"]
        teams = ["Solo (1 person)", "Medium team (6-15 people)", "Large team (16+ people)"]
        feature_sets = [[], NEUTRAL_TAGS[:4], NEUTRAL_TAGS + WEIGHTED_TAGS]
        for experience, team, features in itertools.product(experiences, teams, feature_sets):
            timeline = estimate_timeline(
                req_factory(experience=experience, team_size=team, features=features)
            )
            weeks = [m.week for m in timeline.milestones]
            assert weeks == sorted(weeks)
            assert weeks[-1] == timeline.estimated.weeks >= 1
            assert [m.name for m in timeline.milestones] == [
                "Project Kickoff", "MVP Ready", "Beta Release", "Production Launch",
            ]
