from typing import Any, Dict, Optional

from openai import AsyncOpenAI, OpenAIError

from veospark.core.config import Settings
from veospark.services.llm.base import BaseTextGenerator, LLMCallError


class OpenAITextGenerator(BaseTextGenerator):
    """Chat Completions backend (gpt-4o by default)."""

    def __init__(self, settings: Settings):
        self.client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        self.model = settings.OPENAI_MODEL
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
        kwargs: Dict[str, Any] = {}
        # json_object mode has no schema slot; the shape lives in the system prompt
        if json_output or response_schema is not None:
            kwargs["response_format"] = {"type": "json_object"}

        messages = []
        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})
        messages.append({"role": "user", "content": content})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.default_temperature if temperature is None else temperature,
                max_tokens=self.max_tokens,
                **kwargs,
            )
        except OpenAIError as e:
            raise LLMCallError(f"OpenAI API error: {e}") from e

        choice = response.choices[0] if response.choices else None
        text = choice.message.content if choice else None
        if not text:
            reason = getattr(choice, "finish_reason", "unknown")
            raise LLMCallError(f"OpenAI returned empty response (finish_reason={reason})")
        return text
