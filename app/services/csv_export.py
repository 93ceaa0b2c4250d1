"""CSV export of stored company records."""

import csv
import io
from collections.abc import Iterable

from app.models import CompanySummary

# Header -> model attribute, in output order
CSV_COLUMNS: list[tuple[str, str]] = [
    ("Name", "name"),
    ("Description", "description"),
    ("Logo", "logo_url"),
    ("Facebook", "facebook_url"),
    ("LinkedIn", "linkedin_url"),
    ("Twitter", "twitter_url"),
    ("Instagram", "instagram_url"),
    ("Address", "address"),
    ("Phone", "phone"),
    ("Email", "email"),
]


def export_companies_csv(companies: Iterable[CompanySummary]) -> str:
    """
    Serialize company records to CSV.

    The screenshot is never exported. Missing values become empty cells.

    Args:
        companies: Records to export

    Returns:
        CSV text with a header row followed by one row per record
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow([header for header, _ in CSV_COLUMNS])

    for company in companies:
        writer.writerow([getattr(company, attr) or "" for _, attr in CSV_COLUMNS])

    return buffer.getvalue()
