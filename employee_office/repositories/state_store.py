"""Key-value world state backed by SQLAlchemy."""
from __future__ import annotations

import json
import logging
from typing import Callable, Iterator, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from employee_office.core.errors import StoreAccessError
from employee_office.db.models import StateEntry
from employee_office.db.session import open_session
from employee_office.repositories.selector import matches, parse_query

logger = logging.getLogger(__name__)


def _as_document(value: bytes) -> Optional[dict]:
    try:
        data = json.loads(value)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


_UPSERT_DIALECTS = {"sqlite": sqlite.insert, "postgresql": postgresql.insert}


def _upsert_statement(session: Session, key: str, value: bytes):
    """``INSERT .. ON CONFLICT DO UPDATE`` for one key, on SQLite or PostgreSQL."""
    dialect = session.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect)
    if insert is None:
        raise StoreAccessError(f"Unsupported database dialect for the state store: {dialect}")
    stmt = insert(StateEntry).values(key=key, value=value)
    return stmt.on_conflict_do_update(
        index_elements=[StateEntry.key],
        set_={"value": stmt.excluded["value"], "updated_at": func.now()},
    )


class StateIterator:
    """(key, value) pairs of a scan, in key order.

    Owns the session it reads from; ``close()`` (or leaving the ``with``
    block) releases it whether or not iteration finished.
    """

    def __init__(self, session: Session, result, predicate: Optional[Callable[[bytes], bool]] = None) -> None:
        self._session = session
        self._result = result
        self._predicate = predicate
        self._closed = False

    def __iter__(self) -> Iterator[tuple[str, bytes]]:
        try:
            for row in self._result:
                value = bytes(row.value)
                if self._predicate is None or self._predicate(value):
                    yield row.key, value
        except SQLAlchemyError as exc:
            raise StoreAccessError(f"Failed to read scan results: {exc}") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._result.close()
        finally:
            self._session.close()

    def __enter__(self) -> "StateIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class SQLStateStore:
    """put/get/range-scan/rich-query primitives over the ``ledger_state`` table."""

    def __init__(self, session_factory: Callable[[], Session] = open_session) -> None:
        self._session_factory = session_factory

    def put_state(self, key: str, value: bytes) -> None:
        if not key:
            raise StoreAccessError("key must not be an empty string")
        with self._session_factory() as session:
            try:
                session.execute(_upsert_statement(session, key, value))
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                raise StoreAccessError(f"Failed to write {key!r}: {exc}") from exc
        logger.debug("put_state %s (%d bytes)", key, len(value))

    def get_state(self, key: str) -> bytes:
        """Stored bytes for ``key``; ``b""`` when the key is absent."""
        with self._session_factory() as session:
            try:
                entity = session.get(StateEntry, key)
            except SQLAlchemyError as exc:
                raise StoreAccessError(f"Failed to read {key!r}: {exc}") from exc
            return bytes(entity.value) if entity else b""

    def get_state_by_range(self, start_key: str, end_key: str) -> StateIterator:
        stmt = select(StateEntry.key, StateEntry.value).where(StateEntry.key >= start_key)
        if end_key:
            stmt = stmt.where(StateEntry.key < end_key)
        return self._scan(stmt.order_by(StateEntry.key))

    def get_query_result(self, query: str) -> StateIterator:
        selector = parse_query(query)
        stmt = select(StateEntry.key, StateEntry.value).order_by(StateEntry.key)
        return self._scan(stmt, lambda value: matches(selector, _as_document(value)))

    def _scan(self, stmt, predicate: Optional[Callable[[bytes], bool]] = None) -> StateIterator:
        session = self._session_factory()
        try:
            result = session.execute(stmt)
        except SQLAlchemyError as exc:
            session.close()
            raise StoreAccessError(f"Failed to open scan: {exc}") from exc
        return StateIterator(session, result, predicate)
