"""LLM provider abstraction for the OpenAI and Gemini recommendation paths."""

from .base import LLMProvider, LLMResponse
from .factory import PROVIDERS, get_provider, list_providers, provider_names

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "PROVIDERS",
    "get_provider",
    "list_providers",
    "provider_names",
]
