"""Scrape router for the Company Website Scraper.

Runs the scrape pipeline for a URL and stores the resulting record.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import SCRAPE_REQUEST_TIMEOUT_SECONDS
from app.db.deps import get_db
from app.models import ScrapeRequest, ScrapeResponse
from app.repositories.company_repository_sqlalchemy import CompanyRepositorySQLAlchemy
from app.services.errors import ScrapeFailed
from app.services.scraper_service import ScraperService, get_scraper_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/scrape",
    response_model=ScrapeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Scrape a company website",
    description="Fetch a page, extract company metadata, capture a screenshot and store the record.",
    responses={
        422: {"description": "Invalid URL"},
        502: {"description": "Scraping failed after all attempts"},
        504: {"description": "Scraping did not finish in time"},
    },
)
async def scrape_company(
    request: ScrapeRequest,
    db: Session = Depends(get_db),
    service: ScraperService = Depends(get_scraper_service),
) -> ScrapeResponse:
    """Scrape a URL and persist the result.

    Args:
        request: Body containing the URL to scrape.

    Returns:
        ScrapeResponse with the stored company record.

    Raises:
        HTTPException: 502 if every attempt failed, 504 if the scrape timed out.
    """
    logger.info(f"Received scrape request for {request.url}")

    try:
        record = await asyncio.wait_for(
            service.scrape(request.url),
            timeout=SCRAPE_REQUEST_TIMEOUT_SECONDS,
        )
    except ScrapeFailed as e:
        logger.error(f"Scrape failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error scraping data: {e.last_error or e}",
        )
    except asyncio.TimeoutError:
        logger.error(f"Scrape of {request.url} timed out")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail=f"Scraping {request.url} did not finish within {SCRAPE_REQUEST_TIMEOUT_SECONDS:g}s",
        )

    repo = CompanyRepositorySQLAlchemy(db)
    company = repo.save(record, source_url=request.url)
    logger.info(f"Stored company {company.id} scraped from {request.url}")

    return ScrapeResponse(message="Data scraped and saved", company=company)
