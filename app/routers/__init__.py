"""Routers package for API endpoints.

This package contains the FastAPI routers for the Company Website Scraper.
"""

from app.routers import records, scrape

__all__ = ["records", "scrape"]
