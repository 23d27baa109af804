from veospark.db.base import Base
from .history import AppSetting, HistoryEntry

__all__ = ["Base", "AppSetting", "HistoryEntry"]
