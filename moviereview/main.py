"""
=============================================================================
MOVIE REVIEW API
=============================================================================
Features:
  - Movie catalog with search, genre/year filters, sorting and pagination
  - Star ratings and text reviews (one per user per movie)
  - Server-side rating aggregation
  - Personal watchlists
  - JWT bearer authentication
=============================================================================
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, settings as default_settings
from .exceptions import (
    MovieReviewException,
    app_exception_handler,
    global_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .limiter import limiter
from .logging_config import setup_logging
from .middleware import RequestTrackingMiddleware
from .repositories.store import RecordStore, MOVIES
from .routers import auth_router, movie_router, user_router
from .seed_data import seed_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Movie Review API started", extra={"movies": app.state.store.count(MOVIES)})
    yield
    logger.info("Movie Review API stopped")


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Movie catalog, reviews, ratings and watchlists",
        version="1.0.0",
        lifespan=lifespan,
    )

    # One store per application instance
    if store is None:
        store = RecordStore()
        if settings.SEED_DATA:
            seed_store(store)
    app.state.store = store
    app.state.limiter = limiter

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTrackingMiddleware)

    app.add_exception_handler(MovieReviewException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(auth_router.router, prefix=settings.API_PREFIX)
    app.include_router(movie_router.router, prefix=settings.API_PREFIX)
    app.include_router(user_router.router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["system"])
    async def health_check():
        return {
            "status": "healthy",
            "movies": app.state.store.count(MOVIES),
        }

    return app


app = create_app()
