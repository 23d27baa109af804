import math
import re
from typing import Optional

# Empirical speaking rate for voiceover narration
WORDS_PER_SECOND = 2.5

_NON_NUMERIC = re.compile(r"[^\d.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_duration(duration_str: Optional[str]) -> float:
    """
    Convert a free-text duration ("10s", "2m", "1.5 min") to seconds.

    Single-unit input only: anything containing "m" (but not "ms") is read
    as minutes, everything else as seconds. Returns 0 when nothing numeric
    can be recovered; callers treat 0 as "duration unknown".
    """
    if not duration_str:
        return 0.0

    # Longest numeric prefix: "1.5." reads as 1.5
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", duration_str))
    if not match:
        return 0.0
    value = float(match.group())
    if math.isnan(value) or math.isinf(value):
        return 0.0

    lowered = duration_str.lower()
    if "m" in lowered and "ms" not in lowered:
        return value * 60
    return value


def target_shot_count(total_seconds: float, cut_seconds: float) -> Optional[int]:
    """floor(total / cut) when both are known, else None (let the model decide)."""
    if total_seconds > 0 and cut_seconds > 0:
        return max(1, math.floor(total_seconds / cut_seconds))
    return None


def target_narration_words(total_seconds: float, fallback: int) -> int:
    if total_seconds > 0:
        return max(1, round(total_seconds * WORDS_PER_SECOND))
    return fallback
