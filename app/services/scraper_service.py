"""Scrape a company website into a CompanyRecord.

One attempt runs the whole pipeline in order: fetch the HTML, parse it,
extract fields, render a screenshot, encode the screenshot. A failed attempt
is thrown away and the pipeline starts again from the fetch, up to
``MAX_SCRAPE_ATTEMPTS`` times.
"""

import logging

import httpx

from app.core.config import (
    FETCH_TIMEOUT_SECONDS,
    MAX_SCRAPE_ATTEMPTS,
    SCRAPER_USER_AGENT,
)
from app.models import CompanyRecord
from app.services.data_uri import PNG_MEDIA_TYPE, encode_data_uri
from app.services.errors import (
    FetchError,
    ParseError,
    RenderError,
    ScrapeFailed,
)
from app.services.extractor import extract, parse_document
from app.services.renderer import PlaywrightRenderer

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (FetchError, ParseError, RenderError)


class ScraperService:
    """Runs the fetch, extract and render pipeline with bounded retries."""

    def __init__(
        self,
        renderer: PlaywrightRenderer | None = None,
        max_attempts: int = MAX_SCRAPE_ATTEMPTS,
        fetch_timeout: float = FETCH_TIMEOUT_SECONDS,
        user_agent: str = SCRAPER_USER_AGENT,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.renderer = renderer or PlaywrightRenderer()
        self.max_attempts = max_attempts
        self.fetch_timeout = fetch_timeout
        self.user_agent = user_agent

    async def scrape(self, url: str) -> CompanyRecord:
        """
        Scrape a page into a fully assembled CompanyRecord.

        Args:
            url: Page to scrape

        Returns:
            CompanyRecord with extracted fields and screenshot

        Raises:
            ScrapeFailed: If every attempt failed
        """
        last_error: Exception | None = None

        for attempt in range(1, self.max_attempts + 1):
            logger.info(f"Scraping {url} (attempt {attempt}/{self.max_attempts})")
            try:
                record = await self._run_attempt(url)
            except RETRYABLE_ERRORS as e:
                last_error = e
                logger.warning(
                    f"Scrape attempt {attempt}/{self.max_attempts} for {url} failed: "
                    f"{type(e).__name__}: {e}"
                )
                continue

            logger.info(f"Scraped {url} on attempt {attempt}")
            return record

        logger.error(f"Giving up on {url} after {self.max_attempts} attempts")
        raise ScrapeFailed(url, self.max_attempts, last_error) from last_error

    async def _run_attempt(self, url: str) -> CompanyRecord:
        html = await self._fetch_page(url)

        soup = parse_document(html)
        record = extract(soup)

        png = await self.renderer.capture(url)

        return record.model_copy(
            update={"screenshot": encode_data_uri(png, PNG_MEDIA_TYPE)}
        )

    async def _fetch_page(self, url: str) -> str:
        """
        Fetch HTML content from URL.

        Args:
            url: URL to fetch

        Returns:
            Response body as text

        Raises:
            FetchError: On timeout, network error or non-2xx status
        """
        async with httpx.AsyncClient(
            timeout=self.fetch_timeout,
            follow_redirects=True,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
        ) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise FetchError(f"Timed out fetching {url}") from e
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                raise FetchError(
                    f"HTTP {status_code} fetching {url}", status_code=status_code
                ) from e
            except httpx.HTTPError as e:
                raise FetchError(f"Network error fetching {url}: {e}") from e
            except httpx.InvalidURL as e:
                raise FetchError(f"Invalid URL {url}: {e}") from e

        logger.debug(f"Fetched {len(response.text)} characters from {response.url}")
        return response.text


# Singleton instance
_scraper_service: ScraperService | None = None


def get_scraper_service() -> ScraperService:
    """Get the singleton ScraperService instance.

    Returns:
        The global ScraperService instance
    """
    global _scraper_service
    if _scraper_service is None:
        _scraper_service = ScraperService()
    return _scraper_service
