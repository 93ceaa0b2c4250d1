"""FastAPI application for the Company Website Scraper.

This module provides the main FastAPI application instance with CORS
middleware configuration and router registration.
"""

# Load environment variables before any other imports
from dotenv import load_dotenv

load_dotenv()

import logging
import os
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import LOG_LEVEL


# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# API version and metadata
API_VERSION = "0.1.0"
API_TITLE = "Company Website Scraper API"
API_DESCRIPTION = """
Company Website Scraper API.

This API provides endpoints for:
- Scraping company metadata and a screenshot from a website
- Listing, retrieving and deleting scraped company records
- Exporting scraped records as CSV
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager.

    Creates the database tables on startup and logs the scraper
    configuration.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup is complete.
    """
    from app.db.base import Base
    from app.db import models  # noqa: F401  (registers tables)
    from app.db.session import engine
    from app.services.scraper_service import get_scraper_service

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")

    service = get_scraper_service()
    logger.info(
        f"Scraper configured: {service.max_attempts} attempts, "
        f"fetch timeout {service.fetch_timeout}s, "
        f"render timeout {service.renderer.timeout_ms}ms"
    )
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    engine.dispose()


# Create FastAPI application instance
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# Configure CORS middleware
# Can be restricted via CORS_ORIGINS environment variable (comma-separated list)
_cors_origins_env = os.getenv("CORS_ORIGINS", "")
if _cors_origins_env:
    ALLOWED_ORIGINS = [
        origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
    ]
else:
    ALLOWED_ORIGINS = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    expose_headers=["Content-Length", "Content-Type", "Content-Disposition"],
)


@app.get("/", tags=["Root"])
async def root() -> dict[str, Any]:
    """Root endpoint returning API information.

    Returns:
        Dict containing API metadata including name, version,
        description, and available documentation URLs.
    """
    return {
        "name": API_TITLE,
        "version": API_VERSION,
        "description": "Scrape company metadata and screenshots from websites",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
            "openapi": "/openapi.json",
        },
        "status": "operational",
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        Dict with status indicating the API is healthy.
    """
    return {"status": "healthy"}


# Router registration
from app.routers import records, scrape

app.include_router(scrape.router, prefix="/api", tags=["scrape"])
app.include_router(records.router, prefix="/api", tags=["records"])
