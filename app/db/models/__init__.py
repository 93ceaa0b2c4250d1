from app.db.models.company import CompanyORM

__all__ = [
    "CompanyORM",
]
