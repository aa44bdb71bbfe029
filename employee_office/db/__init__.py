"""Database helpers (engine/session export)."""

from .session import Base, get_engine, open_session

__all__ = ["Base", "get_engine", "open_session"]
