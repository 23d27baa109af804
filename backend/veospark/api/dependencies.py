from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from veospark.core.config import settings
from veospark.db.session import SessionLocal
from veospark.services.history_store import HistoryStore
from veospark.services.llm import BaseTextGenerator, get_text_generator
from veospark.services.pipeline import PromptStudio


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> HistoryStore:
    return HistoryStore(db)


@lru_cache
def get_generator() -> BaseTextGenerator:
    return get_text_generator(settings)


def get_studio(generator: BaseTextGenerator = Depends(get_generator)) -> PromptStudio:
    return PromptStudio(generator, settings)
