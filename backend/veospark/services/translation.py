# veospark/services/translation.py

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from veospark.schemas import GeneratedPrompt, Language, ProductionNote, Shot
from veospark.services.coercion import (
    PRODUCTION_NOTE_KEYS,
    as_index,
    as_mapping,
    as_text,
    coerce_characters,
)
from veospark.services.json_extraction import extract_json_object
from veospark.services.llm.base import BaseTextGenerator
from veospark.services.outcome import Outcome

_TOP_LEVEL_TEXT = {
    "title": "title",
    "visual_prompt": "visualPrompt",
    "technical_prompt": "technicalPrompt",
    "negative_prompt": "negativePrompt",
    "narration": "narration",
}

_SHOT_TEXT = {
    "visual_prompt": "visualPrompt",
    "technical_prompt": "technicalPrompt",
    "bgm": "bgm",
    "sfx": "sfx",
    "dialogue": "dialogue",
    "lip_sync": "lipSync",
}


def _pick_text(translated: Any, original: Optional[str]) -> Optional[str]:
    text = as_text(translated)
    return text if text.strip() else original


def _pick_characters(translated: Any, original):
    characters = coerce_characters(translated)
    return characters if characters else original


def _find_counterpart(translated_shots: List[Any], shot: Shot, position: int) -> Dict[str, Any]:
    """Match by declared index first, then by array position."""
    for candidate in translated_shots:
        if isinstance(candidate, dict) and as_index(candidate.get("index")) == shot.index:
            return candidate
    if position < len(translated_shots):
        return as_mapping(translated_shots[position])
    return {}


def _reconcile_note(translated: Any, original: ProductionNote) -> ProductionNote:
    note = as_mapping(translated)
    return ProductionNote(**{
        attr: _pick_text(note.get(key), getattr(original, attr))
        for attr, key in PRODUCTION_NOTE_KEYS.items()
    })


def reconcile_translation(original: GeneratedPrompt, translated: Any) -> GeneratedPrompt:
    """
    Merge a translated parallel structure onto `original`.

    Iterates the ORIGINAL shots so ids, order, count and durations are
    preserved. Any field missing or empty in the translation keeps its
    original value.
    """
    data = as_mapping(translated)
    raw_shots = data.get("shots")
    translated_shots = raw_shots if isinstance(raw_shots, list) else []

    shots: List[Shot] = []
    for position, shot in enumerate(original.shots):
        counterpart = _find_counterpart(translated_shots, shot, position)
        update: Dict[str, Any] = {
            attr: _pick_text(counterpart.get(key), getattr(shot, attr))
            for attr, key in _SHOT_TEXT.items()
        }
        update["characters"] = _pick_characters(counterpart.get("characters"), shot.characters)
        shots.append(shot.model_copy(update=update))

    update = {
        attr: _pick_text(data.get(key), getattr(original, attr))
        for attr, key in _TOP_LEVEL_TEXT.items()
    }
    update["characters"] = _pick_characters(data.get("characters"), original.characters)
    update["production_note"] = _reconcile_note(data.get("productionNote"), original.production_note)
    update["shots"] = shots
    return original.model_copy(update=update)


def translation_payload(result: GeneratedPrompt) -> Dict[str, Any]:
    """The parallel structure sent for translation (ids and durations omitted)."""
    return {
        "title": result.title,
        "visualPrompt": result.visual_prompt,
        "technicalPrompt": result.technical_prompt,
        "negativePrompt": result.negative_prompt,
        "narration": result.narration,
        "characters": [c.model_dump(by_alias=True) for c in result.characters],
        "productionNote": result.production_note.model_dump(by_alias=True),
        "shots": [
            {
                "index": s.index,
                "visualPrompt": s.visual_prompt,
                "technicalPrompt": s.technical_prompt,
                "bgm": s.bgm,
                "sfx": s.sfx,
                "characters": [c.model_dump(by_alias=True) for c in s.characters],
                "dialogue": s.dialogue,
                "lipSync": s.lip_sync,
            }
            for s in result.shots
        ],
    }


def _result_translation_prompt(language: Language) -> str:
    target = language.display_name
    return f"""
You are a professional translator for video AI prompts.
Translate the VALUES of the JSON object you receive into {target}.

CRITICAL RULE:
- Keep all JSON KEYS in English (e.g. "visualPrompt", "shots", "index"). ONLY translate the VALUES.
- Keep every shot and its "index" exactly as given. Do not add, drop or reorder shots.

Rules:
1. 'title', 'visualPrompt', 'negativePrompt': translate naturally, preserving the vivid tone.
2. 'technicalPrompt': translate descriptive words but KEEP standard industry terms
   (e.g. "Unreal Engine 5", "Octane Render", "Bokeh", "8k") in English.
3. 'narration' and 'dialogue': translate the spoken text and the bracketed emotion/tone tags.
4. 'characters': translate 'name' and 'description'.
5. 'productionNote', 'bgm', 'sfx', 'lipSync': translate naturally.

Return ONLY the valid JSON object. Do not wrap it in markdown code blocks.
""".strip()


def _text_translation_prompt(language: Language) -> str:
    return (
        f"Translate the user's text to {language.display_name}. "
        "Return ONLY the translation, with no additional commentary or quotes."
    )


def _strip_quotes(text: str) -> str:
    cleaned = text.strip()
    if len(cleaned) > 1 and cleaned.startswith('"') and cleaned.endswith('"'):
        cleaned = cleaned[1:-1]
    return cleaned


async def translate_text(
    generator: BaseTextGenerator, text: str, language: Language
) -> Outcome[str]:
    if not text or not text.strip():
        return Outcome.ok("")

    try:
        reply = await generator.generate(_text_translation_prompt(language), text)
    except Exception as e:
        print(f"[Translate] Text translation failed, keeping original: {e}")
        return Outcome.fallback(text, e)

    cleaned = _strip_quotes(reply or "")
    return Outcome.ok(cleaned or text)


async def translate_prompt_result(
    generator: BaseTextGenerator, result: GeneratedPrompt, language: Language
) -> Outcome[GeneratedPrompt]:
    """Best-effort: on any failure the original result is returned unchanged."""
    content = json.dumps(translation_payload(result), ensure_ascii=False)
    try:
        reply = await generator.generate(
            _result_translation_prompt(language), content, json_output=True
        )
        translated = extract_json_object(reply)
    except Exception as e:
        print(f"[Translate] Result {result.id} kept in original language: {e}")
        return Outcome.fallback(result, e)

    return Outcome.ok(reconcile_translation(result, translated))
