"""SQLAlchemy model for invitations."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from halluapp.domain.entities import INVITATION_CODE_LENGTH
from halluapp.infrastructure.database import Base
from halluapp.utils import utcnow


class InvitationModel(Base):
    """Database representation of an onboarding invitation."""

    __tablename__ = "invitations"

    id = Column(Integer, primary_key=True, index=True)
    created_by = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    code = Column(String(INVITATION_CODE_LENGTH), nullable=False, unique=True)
    role_slug = Column(String(255), nullable=False)
    redirect_url = Column(String(2048), nullable=True)
    is_used = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=True, onupdate=utcnow)
    creator = relationship("UserModel", back_populates="invitations", lazy="joined")


__all__ = ["InvitationModel"]
