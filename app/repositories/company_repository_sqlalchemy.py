import uuid

from sqlalchemy.orm import Session, defer

from app.db.models.company import CompanyORM
from app.models import CompanyRecord, CompanyResponse, CompanySummary

# Fields copied between CompanyRecord and CompanyORM
RECORD_FIELDS = list(CompanyRecord.model_fields)
SUMMARY_FIELDS = [field for field in RECORD_FIELDS if field != "screenshot"]


def new_company_id() -> str:
    return f"comp_{uuid.uuid4().hex[:8]}"


def _to_response(orm: CompanyORM) -> CompanyResponse:
    return CompanyResponse(
        id=orm.id,
        source_url=orm.source_url,
        created_at=orm.created_at,
        **{field: getattr(orm, field) for field in RECORD_FIELDS},
    )


def _to_summary(orm: CompanyORM) -> CompanySummary:
    # Must not touch orm.screenshot; it is deferred and would be loaded lazily
    return CompanySummary(
        id=orm.id,
        source_url=orm.source_url,
        created_at=orm.created_at,
        **{field: getattr(orm, field) for field in SUMMARY_FIELDS},
    )


class CompanyRepositorySQLAlchemy:
    def __init__(self, db: Session):
        self.db = db

    def save(self, record: CompanyRecord, source_url: str) -> CompanyResponse:
        orm = CompanyORM(
            id=new_company_id(),
            source_url=source_url,
            **{field: getattr(record, field) for field in RECORD_FIELDS},
        )
        self.db.add(orm)
        self.db.commit()
        self.db.refresh(orm)
        return _to_response(orm)

    def find_all(self, limit: int | None = None, offset: int = 0) -> list[CompanySummary]:
        """List stored records without loading their screenshots."""
        q = (
            self.db.query(CompanyORM)
            .options(defer(CompanyORM.screenshot))
            .order_by(CompanyORM.created_at.desc(), CompanyORM.id.asc())
            .offset(offset)
        )
        if limit is not None:
            q = q.limit(limit)
        return [_to_summary(r) for r in q.all()]

    def find_by_id(self, company_id: str) -> CompanyResponse | None:
        orm = self.db.get(CompanyORM, company_id)
        return _to_response(orm) if orm else None

    def delete_by_id(self, company_id: str) -> bool:
        orm = self.db.get(CompanyORM, company_id)
        if not orm:
            return False
        self.db.delete(orm)
        self.db.commit()
        return True
