"""Extract company metadata from a parsed web page.

Each record field has an ordered list of rules. A rule is a function that
takes the parsed document and returns a string or ``None``. The first rule
returning a non-empty string wins; later rules are not consulted.
"""

import logging
import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from app.models import CompanyRecord
from app.services.errors import ParseError

logger = logging.getLogger(__name__)

Rule = Callable[[BeautifulSoup], str | None]

SOCIAL_DOMAINS = {
    "facebook_url": "facebook.com",
    "linkedin_url": "linkedin.com",
    "twitter_url": "twitter.com",
    "instagram_url": "instagram.com",
}


def _clean_text(element: Tag) -> str:
    """Element text with whitespace runs collapsed to single spaces."""
    text = element.get_text(separator=" ", strip=True)
    return re.sub(r"\s+", " ", text).strip()


def attr_rule(selector: str, attribute: str) -> Rule:
    """Rule returning ``attribute`` of the first element matching ``selector``."""

    def rule(soup: BeautifulSoup) -> str | None:
        element = soup.select_one(selector)
        if element is None:
            return None
        value = element.get(attribute)
        if isinstance(value, list):
            value = " ".join(value)
        return value.strip() if value else None

    return rule


def text_rule(selector: str) -> Rule:
    """Rule returning the text of the first element matching ``selector``."""

    def rule(soup: BeautifulSoup) -> str | None:
        element = soup.select_one(selector)
        if element is None:
            return None
        return _clean_text(element)

    return rule


FIELD_RULES: dict[str, list[Rule]] = {
    "name": [
        attr_rule('meta[property="og:site_name"]', "content"),
        text_rule("title"),
    ],
    "description": [
        attr_rule('meta[name="description"]', "content"),
    ],
    "logo_url": [
        attr_rule('meta[property="og:image"]', "content"),
        attr_rule('link[rel~="icon"]', "href"),
    ],
    **{
        field: [attr_rule(f'a[href*="{domain}"]', "href")]
        for field, domain in SOCIAL_DOMAINS.items()
    },
    "address": [
        text_rule("address"),
    ],
    "phone": [
        text_rule('a[href^="tel:"]'),
    ],
    "email": [
        text_rule('a[href^="mailto:"]'),
    ],
}


def parse_document(body: str) -> BeautifulSoup:
    """
    Parse an HTML body into a traversable tree.

    Args:
        body: Raw HTML text

    Returns:
        Parsed BeautifulSoup document

    Raises:
        ParseError: If the body is empty or cannot be parsed
    """
    if not body or not body.strip():
        raise ParseError("Response body is empty")

    try:
        soup = BeautifulSoup(body, "lxml")
    except Exception as e:
        raise ParseError(f"Could not parse response body: {e}") from e

    if soup.find() is None:
        raise ParseError("Response body contains no markup")
    return soup


def first_match(soup: BeautifulSoup, rules: list[Rule]) -> str | None:
    """Run ``rules`` in order and return the first non-empty result."""
    for rule in rules:
        value = rule(soup)
        if value:
            return value
    return None


def extract(
    soup: BeautifulSoup,
    rules: dict[str, list[Rule]] | None = None,
) -> CompanyRecord:
    """
    Build a CompanyRecord from a parsed page.

    Fields with no matching rule are left as ``None``. The screenshot is
    never set here.

    Args:
        soup: Parsed page
        rules: Field rule table, defaults to FIELD_RULES

    Returns:
        CompanyRecord with the extracted fields
    """
    rules = rules if rules is not None else FIELD_RULES
    values = {field: first_match(soup, field_rules) for field, field_rules in rules.items()}

    found = [field for field, value in values.items() if value is not None]
    logger.debug(f"Extracted {len(found)}/{len(values)} fields: {', '.join(found)}")

    return CompanyRecord(**values)
