from veospark.core.config import Settings
from veospark.services.llm.base import BaseTextGenerator, LLMCallError


def get_text_generator(settings: Settings) -> BaseTextGenerator:
    """Pick the provider named by LLM_PROVIDER. SDKs are imported lazily."""
    provider = settings.LLM_PROVIDER.lower()
    if provider == "openai":
        from veospark.services.llm.openai_client import OpenAITextGenerator
        return OpenAITextGenerator(settings)
    if provider == "gemini":
        from veospark.services.llm.gemini import GeminiTextGenerator
        return GeminiTextGenerator(settings)
    raise ValueError(f"Unknown LLM_PROVIDER: {settings.LLM_PROVIDER}")


__all__ = ["BaseTextGenerator", "LLMCallError", "get_text_generator"]
