"""Typed access to Employee/Office records stored in the world state."""
from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar

from employee_office.domain.keys import KeyRange
from employee_office.domain.records import Record
from employee_office.repositories.state_store import SQLStateStore, StateIterator

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class LedgerRepository:
    """get/put of records keyed by caller-supplied store keys."""

    def __init__(self, store: Optional[SQLStateStore] = None) -> None:
        self.store = store or SQLStateStore()

    def put(self, key: str, record: Record) -> None:
        """Serialize and write unconditionally (last writer wins)."""
        self.store.put_state(key, record.to_bytes())
        logger.debug("stored %s under %s", record.DOC_TYPE, key)

    def get(self, key: str, record_type: Type[R]) -> R:
        """Load ``key``; an absent key gives a zero-valued record."""
        return record_type.from_bytes(self.store.get_state(key), key)

    def scan_range(self, key_range: KeyRange) -> StateIterator:
        return self.store.get_state_by_range(key_range.start, key_range.end)

    def scan_query(self, query: str) -> StateIterator:
        return self.store.get_query_result(query)
