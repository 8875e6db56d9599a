"""Frontend selector.

Server-side priority chain with the mobile and desktop targeting rules
merged in. The target-specific rows only fire for "Mobile App" and
"Desktop Application" projects, so web projects follow the server chain.
"""

from typing import List, Optional

from contracts import FrontendRecommendation as FE, ProjectRequirements
from engine.rules import Rule, always, evaluate
from engine.traits import ProjectTraits


FRONTEND_RULES: List[Rule[FE]] = [
    Rule(
        "backend_only",
        lambda t: t.is_backend_only,
        FE(
            primary="Not Required (Backend Only)",
            reasoning="This is a backend-only project, no frontend technology needed",
            libraries=[],
        ),
    ),
    Rule(
        "gaming_advanced",
        lambda t: t.has_gaming and t.is_advanced,
        FE(
            primary="Unreal Engine (C++)",
            reasoning="Industry-standard game engine with high-performance rendering and advanced features",
            libraries=["Unreal Engine", "Blueprints", "C++ Standard Library", "DirectX/OpenGL"],
        ),
    ),
    Rule(
        "gaming",
        lambda t: t.has_gaming,
        FE(
            primary="Unity (C#)",
            reasoning="User-friendly game development with visual scripting and cross-platform deployment",
            libraries=["Unity Engine", "Unity UI", "Unity Analytics", "Unity Ads"],
        ),
    ),
    Rule(
        "data_science_web",
        lambda t: t.has_ml and t.is_web_target,
        FE(
            primary="Streamlit (Python)",
            reasoning="Rapid development of data science web applications with minimal frontend code",
            libraries=["streamlit", "pandas", "numpy", "plotly", "scikit-learn", "tensorflow"],
        ),
    ),
    Rule(
        "data_science_desktop",
        lambda t: t.has_ml and t.is_desktop_target,
        FE(
            primary="PyQt/PySide (Python)",
            reasoning="Python ecosystem for data science with native desktop UI capabilities",
            libraries=["PyQt6", "pandas", "numpy", "matplotlib", "scikit-learn"],
        ),
    ),
    Rule(
        "performance_desktop",
        lambda t: t.needs_performance and t.is_advanced and t.is_desktop_target,
        FE(
            primary="Qt (C++)",
            reasoning="Native performance with cross-platform compatibility and system-level access",
            libraries=["Qt Widgets", "Qt Network", "Qt SQL", "Qt Charts"],
        ),
    ),
    Rule(
        "performance_mobile",
        lambda t: t.needs_performance and t.is_advanced and t.is_mobile_target,
        FE(
            primary="Flutter",
            reasoning="High-performance cross-platform development with native compilation and excellent UI",
            libraries=["flutter_bloc", "dio", "shared_preferences", "firebase_core"],
        ),
    ),
    Rule(
        "mobile_managed",
        lambda t: t.is_mobile_target and (t.is_beginner or t.is_low_budget),
        FE(
            primary="Expo (React Native)",
            reasoning="Managed workflow with easy deployment and beginner-friendly development experience",
            libraries=["expo-router", "expo-auth-session", "expo-sqlite", "react-native-paper"],
        ),
    ),
    Rule(
        "mobile",
        lambda t: t.is_mobile_target,
        FE(
            primary="React Native",
            reasoning="Full control over native modules with excellent performance and flexibility",
            libraries=[
                "react-navigation",
                "react-native-vector-icons",
                "react-native-async-storage",
                "react-native-paper",
            ],
        ),
    ),
    Rule(
        "desktop_native",
        lambda t: t.is_desktop_target and (t.is_complex or not t.is_beginner),
        FE(
            primary="Tauri (Rust)",
            reasoning="Lightweight, secure desktop apps with Rust backend and web frontend",
            libraries=["tauri", "serde", "tokio", "reqwest"],
        ),
    ),
    Rule(
        "desktop",
        lambda t: t.is_desktop_target,
        FE(
            primary="Electron (JavaScript)",
            reasoning="Mature ecosystem with extensive documentation and community support",
            libraries=["electron-builder", "electron-updater", "electron-store", "react"],
        ),
    ),
    Rule(
        "beginner_low_budget",
        lambda t: t.is_beginner and t.is_low_budget,
        FE(
            primary="HTML/CSS/JavaScript",
            reasoning="Start with fundamentals - perfect for learning web development basics with minimal setup",
            libraries=["Bootstrap", "jQuery", "Local Storage API", "Fetch API"],
        ),
    ),
    Rule(
        "beginner",
        lambda t: t.is_beginner,
        FE(
            primary="React with Vite",
            reasoning="Modern, beginner-friendly framework with excellent documentation and community support",
            libraries=["react-router-dom", "tailwindcss", "react-hook-form", "axios"],
        ),
    ),
    Rule(
        "intermediate_realtime",
        lambda t: t.is_intermediate and t.has_realtime,
        FE(
            primary="Next.js",
            reasoning="Full-stack React framework with server-side rendering and excellent real-time capabilities",
            libraries=["socket.io-client", "swr", "tailwindcss", "framer-motion"],
        ),
    ),
    Rule(
        "intermediate",
        lambda t: t.is_intermediate,
        FE(
            primary="Vue.js",
            reasoning="Progressive framework with gentle learning curve and excellent performance for intermediate developers",
            libraries=["Vue Router", "Pinia", "Vuetify", "Vite"],
        ),
    ),
    Rule(
        "advanced_enterprise",
        lambda t: t.is_advanced and (t.is_large_team or t.is_complex),
        FE(
            primary="Angular (TypeScript)",
            reasoning="Enterprise framework with strong architecture patterns, perfect for large team collaboration",
            libraries=["Angular Material", "RxJS", "NgRx", "Angular Universal"],
        ),
    ),
    Rule(
        "advanced",
        lambda t: t.is_advanced,
        FE(
            primary="React with TypeScript",
            reasoning="Type-safe development with excellent tooling and flexibility for complex applications",
            libraries=["react-router-dom", "styled-components", "react-query", "framer-motion"],
        ),
    ),
    Rule(
        "expert",
        lambda t: t.is_expert,
        FE(
            primary="Svelte/SvelteKit",
            reasoning="Cutting-edge framework with compile-time optimizations and minimal runtime overhead",
            libraries=["SvelteKit", "Tailwind CSS", "Prisma", "TypeScript"],
        ),
    ),
    # Rows below are only reached when the experience label is unrecognised
    Rule(
        "seo_beginner",
        lambda t: t.needs_seo and t.is_beginner,
        FE(
            primary="Hugo (Go)",
            reasoning="Extremely fast static site generator with excellent SEO and minimal learning curve",
            libraries=["Hugo Modules", "Hugo Pipes", "Markdown", "YAML"],
        ),
    ),
    Rule(
        "seo",
        lambda t: t.needs_seo,
        FE(
            primary="Next.js (JavaScript)",
            reasoning="Server-side rendering with excellent SEO capabilities and flexible deployment options",
            libraries=["next-seo", "next-mdx-remote", "tailwindcss", "framer-motion"],
        ),
    ),
    Rule(
        "ecommerce_advanced",
        lambda t: t.has_payments and t.is_advanced and not t.is_low_budget,
        FE(
            primary="Next.js (JavaScript)",
            reasoning="Built-in SEO optimization, server-side rendering, and excellent e-commerce ecosystem",
            libraries=["next-auth", "stripe", "prisma", "tailwindcss", "framer-motion"],
        ),
    ),
    Rule(
        "ecommerce",
        lambda t: t.has_payments,
        FE(
            primary="WordPress/WooCommerce (PHP)",
            reasoning="Established e-commerce platform with extensive plugins and themes",
            libraries=["WooCommerce", "Elementor", "Yoast SEO", "WP Rocket"],
        ),
    ),
    Rule(
        "dashboard",
        lambda t: t.needs_data_work,
        FE(
            primary="Dash (Python)",
            reasoning="Python-based framework perfect for data visualization and analytics dashboards",
            libraries=["dash", "plotly", "pandas", "numpy", "dash-bootstrap-components"],
        ),
    ),
    Rule(
        "default",
        always,
        FE(
            primary="React (JavaScript)",
            reasoning="Popular, well-documented framework with excellent ecosystem and community support",
            libraries=["react-router-dom", "tailwindcss", "axios", "react-hook-form"],
        ),
    ),
]


def select_frontend(req: ProjectRequirements, traits: Optional[ProjectTraits] = None) -> FE:
    """Pick the frontend recommendation for the requirements."""
    traits = traits or ProjectTraits.from_requirements(req)
    return evaluate(FRONTEND_RULES, traits, "frontend")
