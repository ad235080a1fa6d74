"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mindscore.api.v1.router import api_router
from mindscore.core.config import settings
from mindscore.core.logging import setup_logging
from mindscore.db.init_db import create_tables
from mindscore.middleware.rate_limit import RateLimitMiddleware
from mindscore.scoring.errors import ScoringError, UnknownCatalogKey

VERSION = "0.1.0"

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting MindScore API (env={settings.env})")

    if settings.init_db_on_startup:
        await create_tables()

    yield

    logger.info("Shutting down MindScore API")


app = FastAPI(
    title="MindScore API",
    description="PHQ-9 and GAD-7 assessment scoring with severity classification",
    version=VERSION,
    docs_url=None if settings.is_prod else "/docs",
    redoc_url=None if settings.is_prod else "/redoc",
    openapi_url=None if settings.is_prod else "/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(RateLimitMiddleware, enabled=settings.rate_limit_enabled)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnknownCatalogKey)
async def unknown_catalog_handler(request: Request, exc: UnknownCatalogKey) -> JSONResponse:
    """No catalog for the requested assessment type and age group."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(ScoringError)
async def scoring_error_handler(request: Request, exc: ScoringError) -> JSONResponse:
    """Malformed answers: wrong count or out-of-range values."""
    logger.info(f"Rejected assessment submission: {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    # Don't expose internal errors in production
    if settings.is_prod:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict:
    """Service banner."""
    return {
        "service": "MindScore API",
        "version": VERSION,
        "docs": "Disabled in production" if settings.is_prod else "/docs",
    }
