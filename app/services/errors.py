"""Error types raised by the scrape pipeline."""


class ScraperError(Exception):
    """Base class for scrape pipeline failures."""


class FetchError(ScraperError):
    """The page could not be downloaded (network error, timeout, non-2xx)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(ScraperError):
    """The downloaded body could not be parsed as markup."""


class RenderError(ScraperError):
    """The headless browser failed to launch, navigate or capture."""


class ScrapeFailed(ScraperError):
    """Every scrape attempt failed.

    Attributes:
        url: The URL that was being scraped.
        attempts: Number of attempts made.
        last_error: The error that ended the final attempt.
    """

    def __init__(self, url: str, attempts: int, last_error: Exception | None) -> None:
        reason = str(last_error) if last_error else "unknown error"
        super().__init__(f"Failed to scrape {url} after {attempts} attempts: {reason}")
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
