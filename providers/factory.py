"""Factory for creating LLM providers."""

from typing import Dict, Optional, Type

from engine.errors import UnknownProviderError

from .base import LLMProvider
from .openai_provider import OpenAIProvider
from .gemini_provider import GeminiProvider


# Registry of available providers
PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "gpt": OpenAIProvider,
    "gemini": GeminiProvider,
    "google": GeminiProvider,
}

ALIASES = ("gpt", "google")


def provider_names() -> list:
    """Canonical provider names, without aliases."""
    return [name for name in PROVIDERS if name not in ALIASES]


def get_provider(provider_name: str, model: Optional[str] = None) -> LLMProvider:
    """Get an LLM provider instance.

    Args:
        provider_name: Provider name or alias (openai, gpt, gemini, google)
        model: Optional model override for the provider

    Raises:
        UnknownProviderError: The name is not registered.

    Examples:
        get_provider("openai")
        get_provider("gemini", model="gemini-1.5-flash")
    """
    provider_key = (provider_name or "").lower()
    if provider_key not in PROVIDERS:
        raise UnknownProviderError(provider_name, provider_names())
    return PROVIDERS[provider_key](model=model)


def list_providers() -> Dict[str, dict]:
    """List all providers with their display name and availability.

    Returns:
        Dict mapping provider name to {"name", "available", "model"}
    """
    result = {}
    for name in provider_names():
        provider = PROVIDERS[name]()
        result[name] = {
            "name": provider.display_name,
            "available": provider.is_available(),
            "model": provider.default_model,
        }
    return result
