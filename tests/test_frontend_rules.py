"""Tests for the frontend rule table."""

import pytest

from engine import FRONTEND_RULES, select_frontend
from engine.rules import always

NEUTRAL_TAGS = [
    "Search Functionality",
    "Analytics/Reporting",
    "Email Notifications",
    "Admin Dashboard",
    "API Development",
    "Push Notifications",
    "Offline Functionality",
]


class TestFrontendTable:
    """Structural checks on the table itself."""

    def test_rule_names_unique(self):
        names = [rule.name for rule in FRONTEND_RULES]
        assert len(names) == len(set(names))

    def test_table_ends_with_default(self):
        assert FRONTEND_RULES[-1].predicate is always
        assert FRONTEND_RULES[-1].result.primary == "React (JavaScript)"

    def test_result_is_a_copy(self, req_factory):
        first = select_frontend(req_factory(experience="Expert"))
        first.libraries.append("mutated")
        second = select_frontend(req_factory(experience="Expert"))
        assert "mutated" not in second.libraries


class TestFrontendSelector:
    """Each reachable outcome of the priority chain."""

    def test_backend_only(self, req_factory):
        fe = select_frontend(req_factory(development_type="Backend Only", features=["Gaming"]))
        assert fe.primary == "Not Required (Backend Only)"
        assert fe.libraries == []

    def test_gaming_advanced(self, req_factory):
        fe = select_frontend(req_factory(experience="Advanced", features=["Gaming"]))
        assert fe.primary == "Unreal Engine (C++)"

    @pytest.mark.parametrize("experience", ["Beginner", "Intermediate", "Expert"])
    def test_gaming_other_levels(self, req_factory, experience):
        fe = select_frontend(req_factory(experience=experience, features=["Gaming"]))
        assert fe.primary == "Unity (C#)"

    def test_machine_learning_web(self, req_factory):
        fe = select_frontend(req_factory(experience="Beginner", features=["Machine Learning"]))
        assert fe.primary == "Streamlit (Python)"
        assert "streamlit" in fe.libraries

    def test_machine_learning_desktop(self, req_factory):
        fe = select_frontend(
            req_factory(development_type="Desktop Application", features=["Machine Learning"])
        )
        assert fe.primary == "PyQt/PySide (Python)"

    def test_performance_desktop_advanced(self, req_factory):
        fe = select_frontend(
            req_factory(
                development_type="Desktop Application",
                experience="Advanced",
                features=["High Performance"],
            )
        )
        assert fe.primary == "Qt (C++)"

    def test_performance_mobile_advanced(self, req_factory):
        fe = select_frontend(
            req_factory(development_type="Mobile App", experience="Advanced", features=["Data Processing"])
        )
        assert fe.primary == "Flutter"

    def test_performance_on_web_is_not_native(self, req_factory):
        fe = select_frontend(req_factory(experience="Advanced", features=["High Performance"]))
        assert fe.primary == "React with TypeScript"

    def test_mobile_beginner(self, req_factory):
        fe = select_frontend(req_factory(development_type="Mobile App", experience="Beginner"))
        assert fe.primary == "Expo (React Native)"

    def test_mobile_low_budget(self, req_factory):
        fe = select_frontend(req_factory(development_type="Mobile App", budget="Under ₹1,00,000"))
        assert fe.primary == "Expo (React Native)"

    def test_mobile_default(self, req_factory):
        fe = select_frontend(req_factory(development_type="Mobile App"))
        assert fe.primary == "React Native"

    def test_desktop_beginner_simple(self, req_factory):
        fe = select_frontend(req_factory(development_type="Desktop Application", experience="Beginner"))
        assert fe.primary == "Electron (JavaScript)"

    def test_desktop_beginner_complex(self, req_factory):
        fe = select_frontend(
            req_factory(
                development_type="Desktop Application",
                experience="Beginner",
                features=NEUTRAL_TAGS,
            )
        )
        assert fe.primary == "Tauri (Rust)"

    def test_desktop_intermediate(self, req_factory):
        fe = select_frontend(req_factory(development_type="Desktop Application"))
        assert fe.primary == "Tauri (Rust)"

    @pytest.mark.parametrize("budget", ["Free", "Under ₹1,00,000"])
    def test_beginner_low_budget(self, req_factory, budget):
        fe = select_frontend(req_factory(experience="Beginner", budget=budget))
        assert fe.primary == "HTML/CSS/JavaScript"

    def test_beginner(self, req_factory):
        fe = select_frontend(req_factory(experience="Beginner"))
        assert fe.primary == "React with Vite"

    def test_intermediate_realtime(self, req_factory):
        fe = select_frontend(req_factory(features=["Real-time Updates"]))
        assert fe.primary == "Next.js"
        assert "socket.io-client" in fe.libraries

    def test_intermediate(self, req_factory):
        assert select_frontend(req_factory()).primary == "Vue.js"

    def test_advanced_large_team(self, req_factory):
        fe = select_frontend(req_factory(experience="Advanced", team_size="Large team (16+ people)"))
        assert fe.primary == "Angular (TypeScript)"

    def test_advanced_complex(self, req_factory):
        fe = select_frontend(req_factory(experience="Advanced", features=NEUTRAL_TAGS))
        assert fe.primary == "Angular (TypeScript)"

    def test_advanced_six_features_is_not_complex(self, req_factory):
        fe = select_frontend(req_factory(experience="Advanced", features=NEUTRAL_TAGS[:6]))
        assert fe.primary == "React with TypeScript"

    def test_advanced(self, req_factory):
        assert select_frontend(req_factory(experience="Advanced")).primary == "React with TypeScript"

    def test_expert(self, req_factory):
        assert select_frontend(req_factory(experience="Expert")).primary == "Svelte/SvelteKit"


class TestFrontendUnknownExperience:
    """Rows after the experience ladder only fire for unrecognised experience labels."""

    def test_seo(self, req_factory):
        fe = select_frontend(req_factory(experience="Guru", features=["Content Management"]))
        assert fe.primary == "Next.js (JavaScript)"
        assert "next-seo" in fe.libraries

    def test_payments(self, req_factory):
        fe = select_frontend(req_factory(experience="Guru", features=["Payment Processing"]))
        assert fe.primary == "WordPress/WooCommerce (PHP)"

    def test_data_processing_dashboard(self, req_factory):
        fe = select_frontend(req_factory(experience="Guru", features=["Data Processing"]))
        assert fe.primary == "Dash (Python)"

    def test_default(self, req_factory):
        fe = select_frontend(req_factory(experience="Guru"))
        assert fe.primary == "React (JavaScript)"

    def test_unknown_feature_tags_ignored(self, req_factory):
        fe = select_frontend(req_factory(features=["Teleportation"]))
        assert fe.primary == "Vue.js"
