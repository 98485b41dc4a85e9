"""μlogger API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ULoggerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and resource loader initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Map library preload is opt-in (preload_map_assets); a failed preload only
      logs, the UI then loads the library itself
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import ulogger.infrastructure.database as database
from ulogger.api.error_handlers import register_error_handlers
from ulogger.api.routes import assets, health, settings as settings_routes, tracks
from ulogger.config import get_settings
from ulogger.infrastructure.observability import setup_logging
from ulogger.services.map_assets import build_loader, preload_map_assets

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    loader, fetcher = build_loader(settings)
    app.state.resource_loader = loader
    if settings.preload_map_assets:
        await preload_map_assets(loader, settings)
    logger.info("μlogger API started")
    yield
    await loader.drain()
    await fetcher.aclose()
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("μlogger API shutting down")


app = FastAPI(
    title="μlogger API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tracks.router)
app.include_router(settings_routes.router)
app.include_router(assets.router)

register_error_handlers(app)

# Static files — serves the web UI build; mounted after API routes so
# /api/v1/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
