"""Pydantic models for the Company Website Scraper.

``CompanyRecord`` is what the scrape pipeline produces. The remaining models
describe what the API accepts and returns once a record has been stored.
"""

from datetime import datetime
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(word.capitalize() for word in components[1:])


class CompanyRecord(BaseModel):
    """Company metadata extracted from a single web page.

    Every field is optional. A field that no extraction rule matched is
    ``None``; the extractor never fills a field with an empty string.

    Attributes:
        name: Site or company name.
        description: Meta description of the page.
        logo_url: Social preview image or favicon URL.
        facebook_url: First Facebook link found on the page.
        linkedin_url: First LinkedIn link found on the page.
        twitter_url: First Twitter link found on the page.
        instagram_url: First Instagram link found on the page.
        address: Text of the first ``<address>`` element.
        phone: Text of the first ``tel:`` link.
        email: Text of the first ``mailto:`` link.
        screenshot: Page screenshot as a ``data:image/png;base64,...`` URI.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    name: str | None = None
    description: str | None = None
    logo_url: str | None = None
    facebook_url: str | None = None
    linkedin_url: str | None = None
    twitter_url: str | None = None
    instagram_url: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    screenshot: str | None = None


class ScrapeRequest(BaseModel):
    """Body of ``POST /api/scrape``."""

    url: str = Field(..., min_length=1, max_length=2048, description="Page to scrape")

    @field_validator("url")
    @classmethod
    def normalize_url(cls, v: str) -> str:
        """Default to https and reject non-web schemes."""
        v = v.strip()
        if "://" not in v:
            v = f"https://{v}"
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("url must be an http(s) URL")
        # Port and IDNA host checks happen when httpx parses the URL
        try:
            httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"url is not valid: {e}") from e
        return v


class CompanySummary(BaseModel):
    """Stored company record without its screenshot payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )

    id: str
    source_url: str
    created_at: datetime
    name: str | None = None
    description: str | None = None
    logo_url: str | None = None
    facebook_url: str | None = None
    linkedin_url: str | None = None
    twitter_url: str | None = None
    instagram_url: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None


class CompanyResponse(CompanySummary):
    """Stored company record including the screenshot data URI."""

    screenshot: str | None = None


class ScrapeResponse(BaseModel):
    """Result of a successful scrape."""

    message: str
    company: CompanyResponse
