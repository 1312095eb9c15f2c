"""Use case for deleting an invitation."""

from sqlalchemy.orm import Session

from halluapp.domain.exceptions import NotFoundError
from halluapp.infrastructure.repositories import InvitationRepository


def delete_invitation(session: Session, invitation_id: int) -> None:
    """Remove the invitation, which also revokes its code."""

    repository = InvitationRepository(session)
    if repository.get(invitation_id) is None:
        raise NotFoundError("Invitation not found")
    repository.delete(invitation_id)
