"""Dev tools selector: version control, deployment target and CI/CD."""

from typing import Optional

from contracts import DevTools, ProjectRequirements
from engine.traits import ProjectTraits

STORE_DEPLOYMENT = "App Store / Play Store"
DESKTOP_DEPLOYMENT = "GitHub Releases / Microsoft Store / Mac App Store"
LOW_BUDGET_DEPLOYMENT = "Netlify/Vercel (Frontend) + Railway/Render (Backend)"
ENTERPRISE_DEPLOYMENT = "AWS/Google Cloud with Kubernetes"
DEFAULT_DEPLOYMENT = "Digital Ocean/Linode with Docker"

TESTED_CICD = "GitHub Actions with automated testing"
BASIC_CICD = "GitHub Actions (basic deployment)"


def _deployment(traits: ProjectTraits) -> str:
    if traits.is_mobile_target:
        return STORE_DEPLOYMENT
    if traits.is_desktop_target:
        return DESKTOP_DEPLOYMENT
    if traits.is_low_budget:
        return LOW_BUDGET_DEPLOYMENT
    if traits.is_large_team or traits.has_high_performance:
        return ENTERPRISE_DEPLOYMENT
    return DEFAULT_DEPLOYMENT


def select_devtools(req: ProjectRequirements, traits: Optional[ProjectTraits] = None) -> DevTools:
    traits = traits or ProjectTraits.from_requirements(req)
    needs_ci = traits.has_automated_testing or traits.is_advanced
    return DevTools(
        version_control="Git",
        deployment=_deployment(traits),
        cicd=TESTED_CICD if needs_ci else BASIC_CICD,
    )
