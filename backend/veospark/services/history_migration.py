# veospark/services/history_migration.py

"""
Upgrade persisted history records to the current GeneratedPrompt shape.

Older records stored a single motion string instead of a list and lacked
characters / productionNote. Rules run in order on a copy of each record;
records without an id or an originating request are dropped.
"""

from __future__ import annotations

import math
from collections import abc
from typing import Any, Callable, Dict, Iterable, List

from pydantic import ValidationError

from veospark.core.ids import generate_id
from veospark.schemas import CameraMotion, GeneratedPrompt
from veospark.services.coercion import as_index, as_text, coerce_characters, coerce_production_note

Record = Dict[str, Any]


def _motion_as_list(record: Record) -> Record:
    request = dict(record["originalRequest"])
    motion = request.get("motion")
    if not isinstance(motion, list):
        motion = [motion] if motion else [CameraMotion.STATIC.value]
    elif not motion:
        motion = [CameraMotion.STATIC.value]
    request["motion"] = motion
    return {**record, "originalRequest": request}


def _list_fields(record: Record) -> Record:
    updated = dict(record)
    updated["characters"] = [
        c.model_dump(by_alias=True) for c in coerce_characters(updated.get("characters"))
    ]
    if not isinstance(updated.get("shots"), list):
        updated["shots"] = []
    return updated


def _shot_fields(shot: Record, position: int) -> Record:
    index = as_index(shot.get("index"))
    upgraded = {
        "id": as_text(shot.get("id")) or generate_id(),
        "index": index if index is not None else position + 1,
        "duration": as_text(shot.get("duration")),
        "characters": [c.model_dump(by_alias=True) for c in coerce_characters(shot.get("characters"))],
    }
    for key in ("visualPrompt", "technicalPrompt", "dialogue", "lipSync", "bgm", "sfx"):
        upgraded[key] = as_text(shot.get(key))
    return upgraded


def _shot_identity(record: Record) -> Record:
    shots = [
        _shot_fields(shot, position)
        for position, shot in enumerate(record["shots"])
        if isinstance(shot, dict)
    ]
    updated = dict(record)
    updated["shots"] = shots
    stamp = updated.get("timestamp")
    valid = isinstance(stamp, (int, float)) and math.isfinite(stamp)
    updated["timestamp"] = int(stamp) if valid else 0
    return updated


def _narration_and_note(record: Record) -> Record:
    updated = dict(record)
    for key in ("title", "visualPrompt", "technicalPrompt", "narration"):
        updated[key] = as_text(updated.get(key))
    updated["productionNote"] = coerce_production_note(
        updated.get("productionNote")
    ).model_dump(by_alias=True)
    return updated


UPGRADE_RULES: List[Callable[[Record], Record]] = [
    _motion_as_list,
    _list_fields,
    _shot_identity,
    _narration_and_note,
]


def migrate_record(raw: Any) -> GeneratedPrompt | None:
    if not isinstance(raw, dict):
        return None
    if not raw.get("id") or not isinstance(raw.get("originalRequest"), dict):
        return None

    record: Record = raw
    for rule in UPGRADE_RULES:
        record = rule(record)

    try:
        return GeneratedPrompt.model_validate(record)
    except ValidationError as e:
        print(f"[History] Dropping unrecoverable record {raw.get('id')}: {e.error_count()} errors")
        return None


def migrate_history(raw_records: Iterable[Any]) -> List[GeneratedPrompt]:
    # A lone record or a string is not a history list
    if isinstance(raw_records, (dict, str, bytes)) or not isinstance(raw_records, abc.Iterable):
        return []
    migrated = [migrate_record(r) for r in raw_records]
    return [r for r in migrated if r is not None]
