"""Mini Social API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FeedError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database handle opened on startup and disposed on shutdown via the lifespan,
      reachable only through app.state (no module-level connection state)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - One PostLockRegistry per app instance, created with the app so every request
      (and every test client) shares it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import auth, comments, health, posts
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import RequestLoggingMiddleware, setup_logging
from app.services.post_locks import PostLockRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info(f"Mini Social API started ({settings.environment})")
    yield
    logger.info("Mini Social API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="Mini Social API", version="1.0.0", lifespan=lifespan,
)
app.state.post_locks = PostLockRegistry()

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
app.add_middleware(RequestLoggingMiddleware)

register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(posts.router)
app.include_router(comments.router)


@app.get("/", tags=["health"])
async def root():
    return {"ok": True, "message": "Mini Social API"}
