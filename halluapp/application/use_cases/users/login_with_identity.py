"""Use case mapping an external identity onto a local account."""

from dataclasses import replace
import logging

from sqlalchemy.orm import Session

from halluapp.domain.entities import ExternalIdentity, User
from halluapp.domain.exceptions import MissingEmailClaimError
from halluapp.infrastructure.repositories import RoleRepository, UserRepository
from halluapp.infrastructure.security import generate_placeholder_password

logger = logging.getLogger(__name__)


def login_with_identity(
    session: Session,
    identity: ExternalIdentity,
    *,
    default_role_slug: str,
) -> User:
    """Return the local user for ``identity``, creating or linking it as needed.

    Lookup goes by provider uid first and falls back to the email address. A
    matched account without a uid gets it attached; a new account receives an
    unusable password and the default role.
    """

    if not identity.email:
        logger.warning("Identity login rejected, no email for uid %s", identity.uid)
        raise MissingEmailClaimError("Email is required for authentication")

    repository = UserRepository(session)
    user = repository.find_by_firebase_uid_or_email(identity.uid, identity.email)

    if user is None:
        role = RoleRepository(session).get_by_slug(default_role_slug)
        if role is None:
            logger.warning(
                "Default role '%s' not found when creating user %s",
                default_role_slug,
                identity.email,
            )
        user = repository.create(
            User(
                id=None,
                name=identity.display_name(),
                email=identity.email,
                password=generate_placeholder_password(),
                firebase_uid=identity.uid,
                roles=[role] if role else [],
            )
        )
        logger.info("Created user %s for identity %s", user.id, identity.uid)
        return user

    if not user.firebase_uid:
        user = repository.update(
            replace(user, firebase_uid=identity.uid, name=identity.name or user.name)
        )
        logger.info("Attached identity %s to existing user %s", identity.uid, user.id)

    return user
