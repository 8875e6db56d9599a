"""Tests for boundary validation of requirements."""

import logging

import pytest

from engine import (
    CurrencyBudgetMismatch,
    EnginePolicy,
    InvalidDevelopmentType,
    InvalidExperienceLabel,
    InvalidFeatureTag,
    InvalidTeamSizeLabel,
    validate_requirements,
)
from engine.policy import TeamPolicy
from engine.validation import find_label_issues


class TestFindLabelIssues:

    def test_clean_requirements(self, req_factory):
        req = req_factory(features=["User Authentication", "Gaming", "High Performance"])
        assert find_label_issues(req) == []

    def test_issues_in_field_order(self, req_factory):
        req = req_factory(
            development_type="Smart Fridge",
            team_size="Army",
            experience="Guru",
            features=["Teleportation"],
        )
        issues = find_label_issues(req)
        assert [type(i) for i in issues] == [
            InvalidDevelopmentType,
            InvalidTeamSizeLabel,
            InvalidExperienceLabel,
            InvalidFeatureTag,
        ]
        assert issues[3].value == "Teleportation"

    def test_ten_plus_team_label_is_unknown(self, req_factory):
        issues = find_label_issues(req_factory(team_size="Large team (10+ people)"))
        assert len(issues) == 1
        assert issues[0].field == "teamSize"

    def test_configured_large_team_label_is_known(self, req_factory):
        policy = EnginePolicy(teams=TeamPolicy(large_team_labels=("Large team (10+ people)",)))
        assert find_label_issues(req_factory(team_size="Large team (10+ people)"), policy) == []


class TestValidateRequirements:

    def test_lenient_mode_logs_warnings(self, req_factory, caplog):
        req = req_factory(features=["Teleportation"])
        with caplog.at_level(logging.WARNING, logger="engine.validation"):
            issues = validate_requirements(req)
        assert len(issues) == 1
        assert "continuing with default rules" in caplog.text

    def test_strict_mode_raises_first_issue(self, req_factory):
        req = req_factory(experience="Guru", features=["Teleportation"])
        with pytest.raises(InvalidExperienceLabel):
            validate_requirements(req, strict=True)

    def test_strict_mode_passes_clean_input(self, req_factory):
        assert validate_requirements(req_factory(), strict=True) == []

    @pytest.mark.parametrize("strict", [False, True])
    def test_currency_mismatch_always_raises(self, req_factory, strict):
        req = req_factory(budget="$5,000 - $15,000", currency="INR")
        with pytest.raises(CurrencyBudgetMismatch):
            validate_requirements(req, strict=strict)
