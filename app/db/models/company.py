from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from app.db.base import Base


class CompanyORM(Base):
    __tablename__ = "companies"

    id = Column(String, primary_key=True)
    source_url = Column(Text, nullable=False)

    name = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)

    facebook_url = Column(Text, nullable=True)
    linkedin_url = Column(Text, nullable=True)
    twitter_url = Column(Text, nullable=True)
    instagram_url = Column(Text, nullable=True)

    address = Column(Text, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)

    # data:image/png;base64,...
    screenshot = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
