"""
Module for generating text with the Gemini API.
"""

from typing import Optional

import httpx

from google import genai
from google.genai import errors, types

from app.models.schemas import GenerationConfig, TutorialSettings
from app.utils.errors import ConfigurationError, UpstreamError
from app.utils.logger import logging


class GeminiClient:
    """Class to handle Gemini generateContent calls."""

    def __init__(self, settings: TutorialSettings, client: Optional[genai.Client] = None):
        """
        Initialize the Gemini client.

        Args:
            settings: Pipeline settings carrying the Gemini key and model
            client: Optional pre-built google-genai client

        Raises:
            ConfigurationError: If the Gemini API key is missing
        """
        if not settings.gemini_api_key:
            raise ConfigurationError("Gemini API key is not configured")

        self.model = settings.gemini_model
        self._client = client or genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.llm_timeout * 1000)),
        )

    @staticmethod
    def build_content_config(config: GenerationConfig) -> types.GenerateContentConfig:
        """Translate a GenerationConfig into the SDK request config."""
        return types.GenerateContentConfig(
            temperature=config.temperature,
            top_k=config.top_k,
            top_p=config.top_p,
            max_output_tokens=config.max_output_tokens,
            safety_settings=[
                types.SafetySetting(category=setting.category.value, threshold=setting.threshold.value)
                for setting in config.safety_settings
            ],
        )

    async def generate(self, prompt: str, config: GenerationConfig) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Prompt text
            config: Sampling and safety configuration

        Returns:
            Generated text

        Raises:
            UpstreamError: If the API call fails or the response has no text
        """
        logging.debug(f"Gemini request ({len(prompt)} chars) to {self.model}")
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=types.Content(role="user", parts=[types.Part(text=prompt)]),
                config=self.build_content_config(config),
            )
        except errors.APIError as e:
            message = e.message or str(e)
            logging.error(f"Gemini API Error: {message}")
            raise UpstreamError(f"Gemini API Error: {message}", status_code=e.code) from e
        except httpx.HTTPError as e:
            message = str(e) or type(e).__name__
            logging.error(f"Gemini request failed: {message}")
            raise UpstreamError(f"Gemini API Error: {message}") from e

        return _response_text(response)


def _response_text(response: types.GenerateContentResponse) -> str:
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    parts = (content.parts or []) if content else []
    texts = [part.text for part in parts if part.text]

    if not texts:
        reason = None
        if response.prompt_feedback and response.prompt_feedback.block_reason:
            reason = response.prompt_feedback.block_reason
        elif candidates and candidates[0].finish_reason:
            reason = candidates[0].finish_reason
        message = "Gemini API Error: response contained no text"
        if reason:
            message += f" ({reason})"
        logging.error(message)
        raise UpstreamError(message)

    return "".join(texts)
