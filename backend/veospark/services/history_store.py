# veospark/services/history_store.py

from __future__ import annotations

import json
from typing import List, Optional

from sqlalchemy.orm import Session

from veospark import models
from veospark.schemas import GeneratedPrompt, Language
from veospark.services.history_migration import migrate_history

LANGUAGE_KEY = "language"


class HistoryStore:
    """
    Persisted history list + language tag.

    Every mutation replaces the whole list, so readers never observe a
    partially updated history.
    """

    def __init__(self, db: Session):
        self.db = db

    def load(self) -> List[GeneratedPrompt]:
        rows = (
            self.db.query(models.HistoryEntry)
            .order_by(models.HistoryEntry.position)
            .all()
        )
        raw_records = []
        for row in rows:
            try:
                raw_records.append(json.loads(row.payload))
            except json.JSONDecodeError as e:
                print(f"[History] Skipping corrupt payload for {row.id}: {e}")
        return migrate_history(raw_records)

    def save(self, results: List[GeneratedPrompt]) -> List[GeneratedPrompt]:
        existing = {row.id: row for row in self.db.query(models.HistoryEntry).all()}
        kept = set()

        for position, result in enumerate(results):
            if result.id in kept:
                continue
            kept.add(result.id)
            payload = json.dumps(result.to_record(), ensure_ascii=False)

            row = existing.get(result.id)
            if row is None:
                self.db.add(models.HistoryEntry(id=result.id, position=position, payload=payload))
            else:
                row.position = position
                row.payload = payload

        for row_id, row in existing.items():
            if row_id not in kept:
                self.db.delete(row)

        # Single commit: the stored list is replaced as a whole
        self.db.commit()
        return list(results)

    def prepend(self, result: GeneratedPrompt) -> List[GeneratedPrompt]:
        return self.save([result, *self.load()])

    def delete(self, result_id: str) -> bool:
        current = self.load()
        remaining = [r for r in current if r.id != result_id]
        if len(remaining) == len(current):
            return False
        self.save(remaining)
        return True

    def get_language(self, default: Language = Language.ko) -> Language:
        row = self.db.query(models.AppSetting).filter_by(key=LANGUAGE_KEY).first()
        if not row:
            return default
        try:
            return Language(row.value)
        except ValueError:
            return default

    def set_language(self, language: Language) -> Language:
        row = self.db.query(models.AppSetting).filter_by(key=LANGUAGE_KEY).first()
        if row is None:
            row = models.AppSetting(key=LANGUAGE_KEY)
            self.db.add(row)
        row.value = language.value
        self.db.commit()
        return language

    def get(self, result_id: str) -> Optional[GeneratedPrompt]:
        return next((r for r in self.load() if r.id == result_id), None)
