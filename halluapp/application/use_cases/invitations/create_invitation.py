"""Use case for creating invitations."""

from __future__ import annotations

from datetime import datetime
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from halluapp.domain.entities import (
    CUSTOMER_ROLE_SLUG,
    SERVICE_PROVIDER_ROLE_SLUG,
    Invitation,
)
from halluapp.domain.exceptions import InvitationCodeExhaustedError
from halluapp.infrastructure.repositories import InvitationRepository
from halluapp.utils import ensure_naive_utc, utcnow

from .codes import DEFAULT_MAX_ATTEMPTS, generate_invitation_code

logger = logging.getLogger(__name__)

INVITABLE_ROLE_SLUGS = frozenset({CUSTOMER_ROLE_SLUG, SERVICE_PROVIDER_ROLE_SLUG})


def create_invitation(
    session: Session,
    *,
    created_by: int,
    role_slug: str,
    redirect_url: str | None = None,
    expires_at: datetime | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Invitation:
    """Store a new invitation with a freshly generated unique code."""

    if role_slug not in INVITABLE_ROLE_SLUGS:
        raise ValueError(f"Role '{role_slug}' cannot be granted through an invitation")

    expires_at = ensure_naive_utc(expires_at)
    if expires_at is not None and expires_at <= utcnow():
        raise ValueError("The expiry date must be in the future")

    repository = InvitationRepository(session)
    candidates = 0

    def exists(code: str) -> bool:
        nonlocal candidates
        candidates += 1
        return repository.code_exists(code)

    # Lookup collisions and insert races share one attempt budget.
    while candidates < max_attempts:
        code = generate_invitation_code(exists, max_attempts=max_attempts - candidates)
        try:
            invitation = repository.create(
                Invitation(
                    id=None,
                    code=code,
                    role_slug=role_slug,
                    created_by=created_by,
                    redirect_url=redirect_url or None,
                    expires_at=expires_at,
                )
            )
        except IntegrityError:
            repository.rollback()
            logger.warning("Invitation code %s was taken concurrently, retrying", code)
            continue
        logger.info(
            "Invitation %s created by user %s for role %s", invitation.code, created_by, role_slug
        )
        return invitation

    raise InvitationCodeExhaustedError("Could not store a unique invitation code")
