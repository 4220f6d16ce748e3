"""Startup and shutdown hooks for the doctrack app.

Startup configures logging and warns when no database is configured;
shutdown releases the connection pool if one was ever opened.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from doctrack.core.config import get_settings
from doctrack.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the SQL engine on exit."""
    settings = get_settings()
    setup_logging()
    if not settings.sql_enabled:
        logger.warning("DATABASE_URL is not set; database endpoints will answer 503")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    from doctrack.infrastructure.persistence import database

    if getattr(database, "engine", None) is not None:
        await database.engine.dispose()
        logger.info("Database engine disposed")
