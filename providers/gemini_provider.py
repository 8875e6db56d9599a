"""Google Gemini provider implementation."""

import logging
from typing import Optional

from config import settings

from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """Provider for Google Gemini models."""

    MODELS = {
        "gemini-pro": "gemini-pro",
        "gemini-1.5-pro": "gemini-1.5-pro",
        "gemini-1.5-flash": "gemini-1.5-flash",
        "gemini-flash": "gemini-1.5-flash",
    }

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Initialize Gemini provider.

        Args:
            api_key: Google API key. Uses settings / GOOGLE_API_KEY / GEMINI_API_KEY if not provided.
            model: Model override. Uses settings.gemini_model if not provided.
        """
        self.api_key = api_key or settings.get_google_api_key()
        self._model = model or settings.gemini_model
        self._configured = False

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def display_name(self) -> str:
        return "Google Gemini"

    @property
    def default_model(self) -> str:
        return self._model

    def _configure(self):
        if not self._configured and self.api_key:
            import google.generativeai as genai
            genai.configure(api_key=self.api_key)
            self._configured = True

    def _resolve_model(self, model: Optional[str]) -> str:
        if model is None:
            return self.default_model
        return self.MODELS.get(model, model)

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 2500,
        temperature: float = 0.7,
        json_mode: bool = False,
        timeout: Optional[float] = None,
    ) -> LLMResponse:
        import google.generativeai as genai

        self._configure()
        resolved_model = self._resolve_model(model)

        gen_model = genai.GenerativeModel(
            model_name=resolved_model,
            system_instruction=system_prompt,
        )

        config_kwargs = {"max_output_tokens": max_tokens, "temperature": temperature}
        if json_mode:
            config_kwargs["response_mime_type"] = "application/json"

        request_options = {"timeout": timeout} if timeout is not None else None

        logger.info("Calling Gemini %s", resolved_model)
        response = gen_model.generate_content(
            user_message,
            generation_config=genai.types.GenerationConfig(**config_kwargs),
            request_options=request_options,
        )

        # Token counts are not always reported; estimate from text length
        usage = getattr(response, "usage_metadata", None)
        input_tokens = getattr(usage, "prompt_token_count", len(system_prompt + user_message) // 4)
        output_tokens = getattr(usage, "candidates_token_count", len(response.text) // 4)

        return LLMResponse(
            content=response.text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=resolved_model,
            provider=self.name,
        )

    def is_available(self) -> bool:
        return bool(self.api_key)
