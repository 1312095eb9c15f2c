"""Use case for granting the admin role to an existing user."""

from enum import Enum, auto
import logging

from sqlalchemy.orm import Session

from halluapp.domain.entities import ADMIN_ROLE_SLUG
from halluapp.domain.exceptions import NotFoundError
from halluapp.infrastructure.repositories import RoleRepository, UserRepository

logger = logging.getLogger(__name__)


class PromotionStatus(Enum):
    PROMOTED = auto()
    ALREADY_ADMIN = auto()


class AdminRoleMissingError(NotFoundError):
    """The ``admin`` role has not been seeded yet."""


def make_admin(session: Session, email: str) -> PromotionStatus:
    """Attach the admin role to the user owning ``email``."""

    user = UserRepository(session).get_by_email(email)
    if user is None:
        raise NotFoundError(f"User with email {email} not found.")

    admin_role = RoleRepository(session).get_by_slug(ADMIN_ROLE_SLUG)
    if admin_role is None:
        raise AdminRoleMissingError(
            "Admin role not found. Please run the roles:seed command first."
        )

    if user.is_admin():
        return PromotionStatus.ALREADY_ADMIN

    UserRepository(session).attach_role(user.id, admin_role.id)
    logger.info("Granted admin role to user %s", user.id)
    return PromotionStatus.PROMOTED
