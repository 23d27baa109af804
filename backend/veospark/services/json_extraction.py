# veospark/services/json_extraction.py

"""
Recover a single JSON object from whatever text the LLM sent back.

Replies come back as clean JSON, JSON inside a ```json fence, JSON wrapped
in commentary, or JSON with small syntax slips (trailing commas, raw
newlines inside strings). Strategies run in order and the first one that
yields a JSON object wins:

1. direct parse
2. contents of the first fenced code block
3. brace-balanced scan from the first "{" (string/escape aware),
   then the same substring after cheap repairs
4. first "{" to last "}"

If everything fails a JSONExtractionError carrying the raw text is raised.
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable, Dict, List, Optional

_FENCE = re.compile(r"```[ \t]*(?:json|JSON)?[ \t]*\r?\n?(.*?)(?:```|$)", re.DOTALL)
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")

_PREVIEW_CHARS = 120


class JSONExtractionError(ValueError):
    """No strategy could recover a JSON object from the model output."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


def _loads_object(candidate: Optional[str]) -> Optional[Dict[str, Any]]:
    if not candidate or not candidate.strip():
        return None
    try:
        data = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        return None
    return data if isinstance(data, dict) else None


def _strip_fence(text: str) -> Optional[str]:
    match = _FENCE.search(text)
    if not match:
        return None
    return match.group(1).strip()


def _balanced_object(text: str, start: int) -> Optional[str]:
    """Return text[start:end] where the brace opened at `start` closes."""
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start:i + 1]
    return None


def remove_trailing_commas(candidate: str) -> str:
    return _TRAILING_COMMA.sub(r"\1", candidate)


def escape_bare_newlines(candidate: str) -> str:
    """Escape raw CR/LF/TAB characters that sit inside string literals."""
    out: List[str] = []
    in_string = False
    escaped = False
    replacements = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}

    for ch in candidate:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            elif ch in replacements:
                out.append(replacements[ch])
                continue
        elif ch == '"':
            in_string = True
        out.append(ch)
    return "".join(out)


_REPAIRS: List[Callable[[str], str]] = [remove_trailing_commas, escape_bare_newlines]


def extract_json_object(text: Optional[str]) -> Dict[str, Any]:
    """Parse `text` into a dict, trying progressively more forgiving strategies."""
    raw = text or ""

    # 1) Direct parse
    data = _loads_object(raw)
    if data is not None:
        return data

    # 2) Fenced code block
    data = _loads_object(_strip_fence(raw))
    if data is not None:
        return data

    start = raw.find("{")
    if start == -1:
        raise JSONExtractionError("No JSON object found in response", raw)

    # 3) Brace-balanced scan, then repairs applied cumulatively
    candidate = _balanced_object(raw, start)
    if candidate is not None:
        data = _loads_object(candidate)
        if data is not None:
            return data

        repaired = candidate
        for repair in _REPAIRS:
            repaired = repair(repaired)
            data = _loads_object(repaired)
            if data is not None:
                print(f"[JSON] Recovered object after {repair.__name__}")
                return data

    # 4) First "{" to last "}"
    end = raw.rfind("}")
    if end > start:
        data = _loads_object(raw[start:end + 1])
        if data is not None:
            return data

    preview = raw[:_PREVIEW_CHARS].replace("\n", " ")
    print(f"[JSON] All extraction strategies failed: {preview}...")
    raise JSONExtractionError("Could not parse a JSON object from response", raw)
