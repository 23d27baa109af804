from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Outcome(Generic[T]):
    """
    Result of a best-effort operation.

    `degraded` is True when the call failed and `value` is the fallback
    (original text, empty suggestion, untranslated result).
    """
    value: T
    degraded: bool = False
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: BaseException) -> "Outcome[T]":
        return cls(value=value, degraded=True, error=f"{type(error).__name__}: {error}")
