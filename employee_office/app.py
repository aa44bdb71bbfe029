"""FastAPI application exposing the ledger dispatcher."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from employee_office.core.config import get_settings
from employee_office.core.logging_config import setup_logging
from employee_office.db.create_tables import create_all
from employee_office.routers import ledger as ledger_router
from employee_office.services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def create_app(dispatcher: Dispatcher | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``--factory``)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        create_all()
        logger.info("Ledger schema ready (env=%s)", settings.app_env)
        yield

    app = FastAPI(title="Employee Office Ledger API", lifespan=lifespan)
    app.state.dispatcher = dispatcher or Dispatcher(seed_key_style=settings.seed_key_style)
    app.include_router(ledger_router.router)
    return app
