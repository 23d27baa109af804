# veospark/services/coercion.py

"""
Untrusted-input boundary: map a parsed model reply (any shape) onto the
strict GeneratedPrompt model. Every field access is defaulted; nothing is
cast directly.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from veospark.core.ids import generate_id
from veospark.schemas import (
    PLACEHOLDER,
    Character,
    GeneratedPrompt,
    ProductionNote,
    PromptRequest,
    Shot,
)

PRODUCTION_NOTE_KEYS = {
    "director_vision": "directorVision",
    "cinematography": "cinematography",
    "art_direction": "artDirection",
    "sound_design": "soundDesign",
    "editing_style": "editingStyle",
}


def as_text(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def as_index(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def as_mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def coerce_characters(value: Any) -> List[Character]:
    if not isinstance(value, list):
        return []
    characters: List[Character] = []
    for item in value:
        if isinstance(item, dict):
            characters.append(
                Character(
                    name=as_text(item.get("name")),
                    description=as_text(item.get("description")),
                )
            )
        elif isinstance(item, str) and item.strip():
            characters.append(Character(name=item.strip()))
    return characters


def coerce_production_note(value: Any) -> ProductionNote:
    note = as_mapping(value)
    fields = {}
    for attr, key in PRODUCTION_NOTE_KEYS.items():
        text = as_text(note.get(key))
        fields[attr] = text if text.strip() else PLACEHOLDER
    return ProductionNote(**fields)


def coerce_shots(value: Any, cut_duration: str) -> List[Shot]:
    if not isinstance(value, list):
        return []

    shots: List[Shot] = []
    for position, item in enumerate(value):
        raw = as_mapping(item)
        index = as_index(raw.get("index"))
        shots.append(
            Shot(
                id=generate_id(),
                index=index if index is not None else position + 1,
                visual_prompt=as_text(raw.get("visualPrompt")),
                technical_prompt=as_text(raw.get("technicalPrompt")),
                # The user's cut duration is authoritative, never the model's
                duration=cut_duration,
                characters=coerce_characters(raw.get("characters")),
                dialogue=as_text(raw.get("dialogue")),
                lip_sync=as_text(raw.get("lipSync")),
                bgm=as_text(raw.get("bgm")),
                sfx=as_text(raw.get("sfx")),
            )
        )
    return shots


def coerce_result(data: Any, request: PromptRequest) -> GeneratedPrompt:
    """
    Build a GeneratedPrompt from an extracted reply.

    Fresh ids and timestamp are assigned here. The shot count is not checked
    against the requested target; a mismatch is tolerated.
    """
    raw = as_mapping(data)
    negative = raw.get("negativePrompt")

    return GeneratedPrompt(
        id=generate_id(),
        title=as_text(raw.get("title")),
        visual_prompt=as_text(raw.get("visualPrompt")),
        technical_prompt=as_text(raw.get("technicalPrompt")),
        negative_prompt=as_text(negative) if negative is not None else None,
        narration=as_text(raw.get("narration")),
        characters=coerce_characters(raw.get("characters")),
        production_note=coerce_production_note(raw.get("productionNote")),
        shots=coerce_shots(raw.get("shots"), request.cut_duration),
        timestamp=int(time.time() * 1000),
        original_request=request,
    )
