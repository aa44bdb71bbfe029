"""Create the ``ledger_state`` table when it is missing."""
from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)


def create_all() -> list[str]:
    """Create missing ledger tables and return the names that were created."""
    engine = get_engine()
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = [name for name in Base.metadata.tables if name not in existing]
    if created:
        logger.info("Created ledger tables: %s", ", ".join(created))
    else:
        logger.debug("Ledger tables already present on %s", engine.url.render_as_string(hide_password=True))
    return created


if __name__ == "__main__":
    try:
        names = create_all()
        print(f"Ledger tables created: {', '.join(names) or 'none (already present)'}")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create ledger tables: {exc}") from exc
