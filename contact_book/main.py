"""Contact Book API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (health, people)
    - Global error handlers registered from api/error_handlers.py
    - CORS configured from settings
    - Logging and the database session manager initialised in the lifespan;
      the engine is disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event
    - Request logging as middleware so every people route is covered without
      touching route handlers
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_book import __version__
from contact_book.api.error_handlers import register_error_handlers
from contact_book.api.request_logging import RequestLoggingMiddleware
from contact_book.api.routes import health, people
from contact_book.config import get_settings
from contact_book.infrastructure.database import init_db
from contact_book.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Contact Book API started")
    yield
    await manager.dispose()
    logger.info("Contact Book API shutting down")


app = FastAPI(
    title="Contact Book API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(people.router)

register_error_handlers(app)
