"""SQLAlchemy model for permissions."""

from sqlalchemy import Column, DateTime, Integer, String

from halluapp.infrastructure.database import Base
from halluapp.utils import utcnow


class PermissionModel(Base):
    """Database representation of a capability that roles can grant."""

    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=utcnow)


__all__ = ["PermissionModel"]
