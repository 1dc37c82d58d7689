"""Google Gemini adapter implementing the LLM port via the google-genai SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ....core.domain.exceptions import (
    SERVICE_UNAVAILABLE_MESSAGE,
    MissingAPIKeyError,
    ServiceUnavailableError,
)
from ....core.ports.llm_port import LLMPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class GeminiAdapter(LLMPort):
    """Answer prompts with a Gemini model using a fixed sampling configuration."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-3-flash-preview",
        temperature: float = 0.7,
        top_p: float = 0.95,
        top_k: int = 40,
    ) -> None:
        """Initialize the Gemini adapter.

        Args:
            api_key: Google AI API key.
            model: Model to use.
            temperature: Sampling temperature.
            top_p: Nucleus sampling threshold.
            top_k: Top-k sampling cutoff.
        """
        self.api_key = api_key
        self.model_name = model
        self.temperature = temperature
        self.top_p = top_p
        self.top_k = top_k
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Get one at https://aistudio.google.com/ "
                    "and set GOOGLE_API_KEY in your .env file.",
                    context={"model": self.model_name},
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def answer_query(self, prompt: str) -> str:
        """Generate a response for a single prompt.

        No retries are attempted; any failure is reported as
        ServiceUnavailableError with the original exception as cause.

        Returns:
            Generated text, or an empty string if the model returned none.
        """
        from google.genai.types import GenerateContentConfig

        client = self._get_client()

        try:
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=GenerateContentConfig(
                    temperature=self.temperature,
                    top_p=self.top_p,
                    top_k=self.top_k,
                ),
            )
            text = response.text
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise ServiceUnavailableError(
                SERVICE_UNAVAILABLE_MESSAGE,
                cause=e,
                context={"model": self.model_name},
            ) from e

        return text or ""
