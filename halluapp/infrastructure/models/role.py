"""SQLAlchemy models for roles and their join tables."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from halluapp.infrastructure.database import Base
from halluapp.utils import utcnow


role_user_table = Table(
    "role_user",
    Base.metadata,
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

permission_role_table = Table(
    "permission_role",
    Base.metadata,
    Column(
        "permission_id",
        Integer,
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class RoleModel(Base):
    """Database representation of the system roles."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    slug = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=utcnow)
    permissions = relationship(
        "PermissionModel",
        secondary=permission_role_table,
        lazy="selectin",
        order_by="PermissionModel.id",
    )


__all__ = ["RoleModel", "permission_role_table", "role_user_table"]
