"""Shared fixtures: a requirements factory and a frozen clock."""

from datetime import datetime, timezone

import pytest

from contracts import ProjectRequirements

FIXED_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_requirements(**overrides) -> ProjectRequirements:
    """Intermediate web app with a mid-range INR budget unless overridden."""
    data = {
        "project_name": "Test Project",
        "development_type": "Web Application",
        "description": "A test project",
        "budget": "₹3,00,000 - ₹6,00,000",
        "currency": "INR",
        "timeline": "3-6 months",
        "team_size": "Small team (2-5 people)",
        "experience": "Intermediate",
        "features": [],
    }
    data.update(overrides)
    return ProjectRequirements(**data)


@pytest.fixture
def req_factory():
    return make_requirements


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME
