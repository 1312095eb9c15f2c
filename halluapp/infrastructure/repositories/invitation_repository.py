"""Persistence layer for invitations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, update
from sqlalchemy.orm import Session, joinedload

from halluapp.domain.entities import Invitation, InvitationCreator
from halluapp.infrastructure.models import InvitationModel


class InvitationRepository:
    """Provide CRUD operations for invitation entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int = 10) -> Sequence[Invitation]:
        query = (
            self.session.query(InvitationModel)
            .options(joinedload(InvitationModel.creator))
            .order_by(InvitationModel.created_at.desc(), InvitationModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def count(self) -> int:
        return self.session.query(func.count(InvitationModel.id)).scalar() or 0

    def get(self, invitation_id: int) -> Invitation | None:
        model = self.session.get(InvitationModel, invitation_id)
        return self._to_entity(model) if model else None

    def get_by_code(self, code: str) -> Invitation | None:
        model = self.session.query(InvitationModel).filter_by(code=code).first()
        return self._to_entity(model) if model else None

    def code_exists(self, code: str) -> bool:
        query = self.session.query(InvitationModel.id).filter(InvitationModel.code == code)
        return query.first() is not None

    def create(self, invitation: Invitation) -> Invitation:
        model = InvitationModel(
            created_by=invitation.created_by,
            code=invitation.code,
            role_slug=invitation.role_slug,
            redirect_url=invitation.redirect_url,
            is_used=invitation.is_used,
            expires_at=invitation.expires_at,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def claim(self, invitation_id: int) -> bool:
        """Mark the invitation used unless another request got there first.

        The change is flushed but not committed so it lands in the same
        transaction as the registration that consumes it.
        """

        result = self.session.execute(
            update(InvitationModel)
            .where(InvitationModel.id == invitation_id)
            .where(InvitationModel.is_used.is_(False))
            .values(is_used=True)
        )
        return result.rowcount == 1

    def delete(self, invitation_id: int) -> None:
        model = self.session.get(InvitationModel, invitation_id)
        if not model:
            msg = f"Invitation with id {invitation_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @staticmethod
    def _to_entity(model: InvitationModel) -> Invitation:
        creator = None
        if model.creator is not None:
            creator = InvitationCreator(
                id=model.creator.id,
                name=model.creator.name,
                email=model.creator.email,
            )
        return Invitation(
            id=model.id,
            code=model.code,
            role_slug=model.role_slug,
            created_by=model.created_by,
            redirect_url=model.redirect_url,
            is_used=model.is_used,
            expires_at=model.expires_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            creator=creator,
        )


__all__ = ["InvitationRepository"]
