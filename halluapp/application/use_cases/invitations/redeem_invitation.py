"""Use case for checking and consuming an invitation code."""

from sqlalchemy.orm import Session

from halluapp.domain.entities import Invitation
from halluapp.domain.exceptions import InvalidInvitationError
from halluapp.infrastructure.repositories import InvitationRepository


def get_valid_invitation(session: Session, code: str) -> Invitation:
    """Return the invitation for ``code`` when it can still be redeemed."""

    invitation = InvitationRepository(session).get_by_code(code.strip().upper())
    if invitation is None:
        raise InvalidInvitationError("The invitation code is not valid")
    if invitation.is_used:
        raise InvalidInvitationError("The invitation code has already been used")
    if invitation.is_expired():
        raise InvalidInvitationError("The invitation code has expired")
    return invitation


def claim_invitation(session: Session, invitation: Invitation) -> None:
    """Mark ``invitation`` used inside the caller's pending transaction."""

    if not InvitationRepository(session).claim(invitation.id):
        raise InvalidInvitationError("The invitation code has already been used")
