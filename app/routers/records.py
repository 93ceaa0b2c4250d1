"""Records router for the Company Website Scraper.

Read, delete and export stored company records.
"""

import logging
import re
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.orm import Session

from app.db.deps import get_db
from app.models import CompanyResponse, CompanySummary
from app.repositories.company_repository_sqlalchemy import CompanyRepositorySQLAlchemy
from app.services.csv_export import export_companies_csv
from app.services.data_uri import decode_data_uri

logger = logging.getLogger(__name__)

# Regex pattern for valid company IDs (alphanumeric with underscores)
COMPANY_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,50}$")

CSV_FILENAME = "companies.csv"

router = APIRouter()


def _validate_company_id(company_id: str) -> None:
    """Validate company ID format to prevent injection attacks."""
    if not COMPANY_ID_PATTERN.match(company_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid company ID format",
        )


def _get_or_404(repo: CompanyRepositorySQLAlchemy, company_id: str) -> CompanyResponse:
    company = repo.find_by_id(company_id)
    if not company:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company with id '{company_id}' not found",
        )
    return company


# ============================================================================
# Static path endpoints MUST be defined before dynamic path endpoints
# ============================================================================


@router.get(
    "/records/export.csv",
    status_code=status.HTTP_200_OK,
    summary="Export records as CSV",
    description="Download every stored company record as a CSV file. Screenshots are not included.",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_records_csv(db: Session = Depends(get_db)) -> Response:
    """Export all stored records as a CSV attachment."""
    repo = CompanyRepositorySQLAlchemy(db)
    companies = repo.find_all()
    logger.info(f"Exporting {len(companies)} companies to CSV")

    return Response(
        content=export_companies_csv(companies),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )


@router.get(
    "/records",
    response_model=list[CompanySummary],
    status_code=status.HTTP_200_OK,
    summary="List all records",
    description="Retrieve stored company records, newest first, without screenshots.",
)
async def list_records(
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
    offset: Annotated[int, Query(ge=0)] = 0,
    db: Session = Depends(get_db),
) -> list[CompanySummary]:
    """List stored records with pagination.

    Args:
        limit: Maximum number of records to return (default 100, max 1000).
        offset: Number of records to skip (default 0).

    Returns:
        List of CompanySummary objects.
    """
    repo = CompanyRepositorySQLAlchemy(db)
    return repo.find_all(limit=limit, offset=offset)


@router.get(
    "/records/{company_id}",
    response_model=CompanyResponse,
    status_code=status.HTTP_200_OK,
    summary="Get record by ID",
    description="Retrieve a single stored company record, including its screenshot.",
    responses={
        400: {"description": "Invalid company ID format"},
        404: {"description": "Company not found"},
    },
)
async def get_record(
    company_id: Annotated[str, Path(min_length=1, max_length=50)],
    db: Session = Depends(get_db),
) -> CompanyResponse:
    """Get a single record by ID.

    Raises:
        HTTPException: 400 if invalid ID format, 404 if company not found.
    """
    _validate_company_id(company_id)
    return _get_or_404(CompanyRepositorySQLAlchemy(db), company_id)


@router.get(
    "/records/{company_id}/screenshot",
    status_code=status.HTTP_200_OK,
    summary="Get record screenshot",
    description="Return the stored screenshot as an image.",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}},
        400: {"description": "Invalid company ID format"},
        404: {"description": "Company or screenshot not found"},
    },
)
async def get_record_screenshot(
    company_id: Annotated[str, Path(min_length=1, max_length=50)],
    db: Session = Depends(get_db),
) -> Response:
    """Decode the stored screenshot data URI and return the raw image."""
    _validate_company_id(company_id)
    company = _get_or_404(CompanyRepositorySQLAlchemy(db), company_id)

    if not company.screenshot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company with id '{company_id}' has no screenshot",
        )

    media_type, image = decode_data_uri(company.screenshot)
    return Response(content=image, media_type=media_type)


@router.delete(
    "/records/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a record",
    description="Delete a stored company record by its unique identifier.",
    responses={
        400: {"description": "Invalid company ID format"},
        404: {"description": "Company not found"},
    },
)
async def delete_record(
    company_id: Annotated[str, Path(min_length=1, max_length=50)],
    db: Session = Depends(get_db),
) -> None:
    """Delete a record by ID.

    Raises:
        HTTPException: 400 if invalid ID format, 404 if company not found.
    """
    _validate_company_id(company_id)
    repo = CompanyRepositorySQLAlchemy(db)

    if not repo.delete_by_id(company_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company with id '{company_id}' not found",
        )
    logger.info(f"Deleted company {company_id}")
