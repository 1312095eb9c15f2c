"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from halluapp.infrastructure.database import Base
from halluapp.infrastructure.models.role import role_user_table
from halluapp.utils import utcnow


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    firebase_uid = Column(String(128), nullable=True, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=utcnow)
    roles = relationship(
        "RoleModel",
        secondary=role_user_table,
        lazy="selectin",
        order_by="RoleModel.id",
    )
    invitations = relationship(
        "InvitationModel",
        back_populates="creator",
        cascade="all, delete-orphan",
    )


__all__ = ["UserModel"]
