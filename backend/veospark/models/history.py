from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text

from veospark.db.base import Base


class HistoryEntry(Base):
    __tablename__ = "history_entries"

    id = Column(String(64), primary_key=True, index=True)

    # 0 = most recent; the list is rewritten as a whole on every mutation
    position = Column(Integer, nullable=False, index=True)

    # JSON-encoded GeneratedPrompt record (camelCase keys)
    payload = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)


class AppSetting(Base):
    __tablename__ = "app_settings"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=True)
