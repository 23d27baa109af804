from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class LLMCallError(RuntimeError):
    """The text-generation service failed, refused, or returned nothing."""


class BaseTextGenerator(ABC):

    @abstractmethod
    async def generate(
        self,
        system_instruction: str,
        content: str,
        *,
        response_schema: Optional[Dict[str, Any]] = None,
        json_output: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Returns: raw model text (not guaranteed to be valid JSON even when
        json_output is requested). Raises LLMCallError on failure.
        """
        pass
