"""Use case for self-registration with local credentials."""

import logging

from sqlalchemy.orm import Session

from halluapp.application.use_cases.invitations import (
    claim_invitation,
    get_valid_invitation,
)
from halluapp.domain.entities import User
from halluapp.domain.exceptions import ConflictError, NotFoundError
from halluapp.infrastructure.repositories import RoleRepository, UserRepository
from halluapp.infrastructure.security import get_password_hash

logger = logging.getLogger(__name__)


def register_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    default_role_slug: str,
    invitation_code: str | None = None,
) -> User:
    """Create an account, granting the invitation's role when a code is given.

    The invitation is consumed in the same transaction that inserts the user.
    """

    repository = UserRepository(session)
    role_repository = RoleRepository(session)

    invitation = get_valid_invitation(session, invitation_code) if invitation_code else None

    if repository.email_in_use(email):
        raise ConflictError("The email has already been taken")

    role_slug = invitation.role_slug if invitation else default_role_slug
    role = role_repository.get_by_slug(role_slug)
    if role is None:
        raise NotFoundError(f"Role '{role_slug}' not found")

    if invitation is not None:
        claim_invitation(session, invitation)

    user = repository.create(
        User(
            id=None,
            name=name,
            email=email,
            password=get_password_hash(password),
            roles=[role],
        )
    )
    logger.info(
        "Registered user %s with role %s%s",
        user.id,
        role.slug,
        f" using invitation {invitation.code}" if invitation else "",
    )
    return user
