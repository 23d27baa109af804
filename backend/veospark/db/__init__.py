from .base import Base
from .session import SessionLocal, engine

__all__ = ["Base", "SessionLocal", "engine"]
