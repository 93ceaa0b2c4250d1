"""Pytest fixtures for Company Website Scraper tests.

This module provides shared fixtures for testing the FastAPI application,
including a test client backed by an in-memory database and sample pages.
"""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.deps import get_db
from app.db import models  # noqa: F401
from app.main import app
from app.models import CompanyRecord
from app.services.scraper_service import ScraperService, get_scraper_service


RENDERED_PNG = b"\x89PNG\r\n\x1a\nrendered"


class FakePlaywright:
    """Stand-in for the async_playwright() context manager."""

    def __init__(self) -> None:
        self.page = MagicMock()
        self.page.goto = AsyncMock()
        self.page.screenshot = AsyncMock(return_value=RENDERED_PNG)

        self.browser = MagicMock()
        self.browser.new_page = AsyncMock(return_value=self.page)
        self.browser.close = AsyncMock()

        self.playwright = MagicMock()
        self.playwright.chromium.launch = AsyncMock(return_value=self.browser)

        self.context_manager = MagicMock()
        self.context_manager.__aenter__ = AsyncMock(return_value=self.playwright)
        self.context_manager.__aexit__ = AsyncMock(return_value=False)

    def patch(self):
        return patch(
            "app.services.renderer.async_playwright",
            return_value=self.context_manager,
        )


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Create a fresh in-memory SQLite session with all tables.

    Yields:
        Session: SQLAlchemy session bound to an isolated database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def mock_scraper() -> MagicMock:
    """Scraper service stand-in whose scrape() is an AsyncMock.

    Returns:
        MagicMock: Object with the ScraperService interface.
    """
    service = MagicMock(spec=ScraperService)
    service.scrape = AsyncMock()
    return service


@pytest.fixture
def client(db_session, mock_scraper) -> Iterator[TestClient]:
    """Create a test client with the database and scraper overridden.

    Returns:
        TestClient: A test client instance for making requests to the API.
    """
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_scraper_service] = lambda: mock_scraper
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_record() -> CompanyRecord:
    """A fully populated scraped record.

    Returns:
        CompanyRecord: Record with every field set.
    """
    return CompanyRecord(
        name="Acme",
        description="Acme builds rockets",
        logo_url="https://acme.example/og.png",
        facebook_url="https://facebook.com/acme",
        linkedin_url="https://www.linkedin.com/company/acme",
        twitter_url="https://twitter.com/acme",
        instagram_url="https://instagram.com/acme",
        address="1 Road Runner Way, Desert, AZ",
        phone="+1 555 0100",
        email="hello@acme.example",
        screenshot="data:image/png;base64,iVBORw0KGgo=",
    )


@pytest.fixture
def full_page_html() -> str:
    """Company homepage with every extractable field present.

    Returns:
        str: HTML document.
    """
    return """
    <html>
      <head>
        <title>Acme Corp | Home</title>
        <meta property="og:site_name" content="Acme">
        <meta name="description" content="Acme builds rockets">
        <meta property="og:image" content="https://acme.example/og.png">
        <link rel="icon" href="/favicon.ico">
      </head>
      <body>
        <footer>
          <a href="https://facebook.com/acme">Facebook</a>
          <a href="https://www.linkedin.com/company/acme">LinkedIn</a>
          <a href="https://twitter.com/acme">Twitter</a>
          <a href="https://instagram.com/acme">Instagram</a>
          <address>
            1 Road Runner Way,
            Desert, AZ
          </address>
          <a href="tel:+15550100">+1 555 0100</a>
          <a href="mailto:hello@acme.example">hello@acme.example</a>
        </footer>
      </body>
    </html>
    """


@pytest.fixture
def fake_playwright() -> FakePlaywright:
    """Fake Playwright driver with a browser, page and screenshot.

    Returns:
        FakePlaywright: Mocks for the driver, browser and page.
    """
    return FakePlaywright()
