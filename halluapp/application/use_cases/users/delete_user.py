"""Use case for a user deleting their own account."""

import logging

from sqlalchemy.orm import Session

from halluapp.domain.exceptions import AuthenticationError, NotFoundError
from halluapp.infrastructure.repositories import UserRepository
from halluapp.infrastructure.security import verify_password

logger = logging.getLogger(__name__)


def delete_user(session: Session, user_id: int, *, password: str) -> None:
    """Delete the account after confirming its password."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not verify_password(password, user.password):
        raise AuthenticationError("The provided password is incorrect")
    repository.delete(user_id)
    logger.info("User %s deleted their account", user_id)
