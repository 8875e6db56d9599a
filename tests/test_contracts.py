"""Tests for the Pydantic contracts.

Verifies that the requirements record accepts the web client's payloads
and that the recommendation models validate their bounds.
"""

import pytest
from pydantic import ValidationError

from contracts import (
    CostEstimate,
    Currency,
    EstimatedDuration,
    FEATURE_VOCABULARY,
    Feature,
    ProjectRequirements,
    RoadmapPhase,
)


class TestProjectRequirements:

    def test_camel_case_payload(self):
        req = ProjectRequirements.model_validate({
            "projectName": "Shop",
            "developmentType": "Web Application",
            "budget": "Under ₹1,00,000",
            "timeline": "1-2 months",
            "teamSize": "Solo (1 person)",
            "experience": "Beginner",
            "features": ["User Authentication"],
        })
        assert req.project_name == "Shop"
        assert req.team_size == "Solo (1 person)"
        assert req.features == ("User Authentication",)

    def test_project_type_alias(self):
        req = ProjectRequirements.model_validate({
            "projectType": "Mobile App",
            "budget": "Free",
            "teamSize": "Solo (1 person)",
            "experience": "Beginner",
        })
        assert req.development_type == "Mobile App"
        assert req.project_name == "Untitled Project"

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            ProjectRequirements.model_validate({
                "developmentType": "Web Application",
                "teamSize": "Solo (1 person)",
                "experience": "Beginner",
            })

    def test_currency_inferred_from_dollar_budget(self, req_factory):
        req = ProjectRequirements.model_validate({
            "developmentType": "Web Application",
            "budget": "$5,000 - $15,000",
            "teamSize": "Solo (1 person)",
            "experience": "Beginner",
        })
        assert req.currency == Currency.USD

    def test_currency_defaults_to_inr(self):
        req = ProjectRequirements.model_validate({
            "developmentType": "Web Application",
            "budget": "Free",
            "teamSize": "Solo (1 person)",
            "experience": "Beginner",
        })
        assert req.currency == Currency.INR

    def test_currency_normalised(self, req_factory):
        assert req_factory(budget="Over $100,000", currency=" usd ").currency == Currency.USD

    def test_unknown_currency_rejected(self, req_factory):
        with pytest.raises(ValidationError):
            req_factory(currency="EUR")

    def test_null_features(self, req_factory):
        req = req_factory(features=None)
        assert req.features == ()
        assert req.feature_count == 0

    def test_unknown_labels_are_kept(self, req_factory):
        req = req_factory(experience="Guru", features=["Teleportation"])
        assert req.experience == "Guru"
        assert req.has_feature("Teleportation")

    def test_frozen(self, req_factory):
        req = req_factory()
        with pytest.raises(ValidationError):
            req.budget = "Free"

    def test_has_feature_any_of(self, req_factory):
        req = req_factory(features=["Gaming"])
        assert req.has_feature("Machine Learning", "Gaming")
        assert not req.has_feature("Machine Learning")

    def test_duplicate_tags_count(self, req_factory):
        assert req_factory(features=["Gaming", "Gaming"]).feature_count == 2

    def test_serialises_camel_case(self, req_factory):
        data = req_factory().model_dump(by_alias=True)
        assert data["developmentType"] == "Web Application"
        assert data["teamSize"] == "Small team (2-5 people)"


class TestVocabulary:

    def test_rule_only_tags_are_known(self):
        for tag in ("Gaming", "Data Processing", "High Performance", "System Integration"):
            assert tag in FEATURE_VOCABULARY

    def test_vocabulary_matches_enum(self):
        assert FEATURE_VOCABULARY == {f.value for f in Feature}


class TestRecommendationContracts:

    def test_cost_estimate_rejects_empty(self):
        with pytest.raises(ValidationError):
            CostEstimate(development="", hosting="x", third_party="y")

    def test_cost_estimate_populate_by_alias(self):
        cost = CostEstimate.model_validate({"development": "a", "hosting": "b", "thirdParty": "c"})
        assert cost.third_party == "c"

    def test_duration_weeks_positive(self):
        with pytest.raises(ValidationError):
            EstimatedDuration(weeks=0, months=1, range={"minimum": "1", "maximum": "2", "realistic": "1"})

    def test_roadmap_phase_defaults(self):
        phase = RoadmapPhase(phase="Planning", duration="1 week")
        assert phase.tasks == []
        assert phase.deliverables == []
