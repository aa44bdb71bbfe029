"""SQLAlchemy model for the key-value world state."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, LargeBinary, String, func

from .session import Base


class StateEntry(Base):
    __tablename__ = "ledger_state"

    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
