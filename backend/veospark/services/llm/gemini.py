from typing import Any, Dict, Optional

import vertexai
from google.api_core import exceptions as google_exceptions
from vertexai.generative_models import GenerationConfig, GenerativeModel

from veospark.core.config import Settings
from veospark.services.llm.base import BaseTextGenerator, LLMCallError


class GeminiTextGenerator(BaseTextGenerator):
    """Vertex AI Gemini backend."""

    def __init__(self, settings: Settings):
        vertexai.init(
            project=settings.GOOGLE_CLOUD_PROJECT_ID,
            location=settings.GOOGLE_CLOUD_LOCATION,
        )
        self.model_id = settings.GEMINI_MODEL
        self.default_temperature = settings.GENERATION_TEMPERATURE
        self.max_tokens = settings.MAX_OUTPUT_TOKENS

    async def generate(
        self,
        system_instruction: str,
        content: str,
        *,
        response_schema: Optional[Dict[str, Any]] = None,
        json_output: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        model = GenerativeModel(
            self.model_id,
            system_instruction=system_instruction or None,
        )

        config_kwargs: Dict[str, Any] = {
            "temperature": self.default_temperature if temperature is None else temperature,
            "max_output_tokens": self.max_tokens,
        }
        if json_output or response_schema is not None:
            config_kwargs["response_mime_type"] = "application/json"
        if response_schema is not None:
            config_kwargs["response_schema"] = response_schema

        try:
            response = await model.generate_content_async(
                content,
                generation_config=GenerationConfig(**config_kwargs),
            )
        except google_exceptions.GoogleAPIError as e:
            raise LLMCallError(f"Gemini API error: {e}") from e

        try:
            text = response.text
        except ValueError as e:
            # Raised by the SDK when the candidate was blocked (safety) or empty
            block_reason = "unknown"
            if response.candidates:
                block_reason = f"finish_reason={response.candidates[0].finish_reason}"
            raise LLMCallError(f"Gemini returned no text ({block_reason}): {e}") from e

        if not text:
            raise LLMCallError("Gemini returned empty response")
        return text
