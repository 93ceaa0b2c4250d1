"""Services package for the Company Website Scraper."""

from app.services.errors import (
    FetchError,
    ParseError,
    RenderError,
    ScrapeFailed,
    ScraperError,
)
from app.services.extractor import FIELD_RULES, extract, parse_document
from app.services.renderer import PlaywrightRenderer
from app.services.scraper_service import ScraperService, get_scraper_service

__all__ = [
    "ScraperService",
    "get_scraper_service",
    "PlaywrightRenderer",
    "FIELD_RULES",
    "extract",
    "parse_document",
    "ScraperError",
    "FetchError",
    "ParseError",
    "RenderError",
    "ScrapeFailed",
]
