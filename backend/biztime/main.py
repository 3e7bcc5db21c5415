"""BizTime API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BizTimeError kinds → HTTP statuses
    - CORS configured from settings (not hardcoded)
    - One Database per process, created in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - APP_ENV picks the production or test connection string once, at startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.error_handlers import register_error_handlers
from biztime.api.routes import companies, health, invoices
from biztime.config import get_settings
from biztime.infrastructure.database import create_database
from biztime.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database = create_database(
        settings.effective_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await database.create_schema()
    app.state.database = database
    logger.info(f"BizTime API started ({settings.app_env})")
    yield
    logger.info("BizTime API shutting down")
    await database.dispose()


app = FastAPI(title="BizTime API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(companies.router)
app.include_router(invoices.router)

register_error_handlers(app)
