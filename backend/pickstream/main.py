"""Pickstream API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Error handling registered before CORS so every response, 500s included,
      carries the CORS headers
    - CORS configured from settings (defaults to any origin)
    - NameStore built once on startup and owned by app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store on app.state + Depends(get_name_store) instead of a module global
    - Lifespan detaches its log handler on shutdown (repeated startups in one
      process do not stack handlers)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pickstream.api.error_handlers import register_error_handlers
from pickstream.api.routes import health, names
from pickstream.config import get_settings
from pickstream.core.name_store import NameStore
from pickstream.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    log_handler = setup_logging(settings.log_level, settings.log_format)
    app.state.name_store = NameStore(settings.default_names)
    logger.info(
        "Pickstream API started",
        extra={"names_count": app.state.name_store.count()},
    )
    yield
    logger.info("Pickstream API shutting down")
    logging.getLogger().removeHandler(log_handler)


settings = get_settings()
app = FastAPI(
    title="Pickstream API", version=settings.service_version, lifespan=lifespan,
)

# Error handling first: middleware added later wraps it, so CORS headers
# also reach the 500 envelope
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(names.router)
