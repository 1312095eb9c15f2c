"""Use case seeding the built-in roles and permissions."""

from dataclasses import dataclass
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from halluapp.domain.entities import (
    ADMIN_ROLE_SLUG,
    CUSTOMER_ROLE_SLUG,
    SERVICE_PROVIDER_ROLE_SLUG,
)
from halluapp.infrastructure.repositories import RoleRepository

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (
    ("Admin", ADMIN_ROLE_SLUG),
    ("Customer", CUSTOMER_ROLE_SLUG),
    ("Service Provider", SERVICE_PROVIDER_ROLE_SLUG),
)
DEFAULT_PERMISSIONS = (
    ("Manage Users", "manage-users"),
    ("Manage Roles", "manage-roles"),
)
ROLE_PERMISSIONS = {
    ADMIN_ROLE_SLUG: ("manage-users", "manage-roles"),
}
SEED_ATTEMPTS = 3


@dataclass(frozen=True)
class SeedResult:
    roles_created: int
    permissions_created: int
    grants_created: int


def seed_roles_and_permissions(session: Session) -> SeedResult:
    """Ensure the default roles, permissions and grants exist. Safe to rerun.

    Workers starting together may insert the same rows; the loser rolls back
    and re-reads what the winner committed.
    """

    for _ in range(SEED_ATTEMPTS - 1):
        try:
            return _seed(session)
        except IntegrityError:
            session.rollback()
            logger.warning("Role seeding raced with another writer, retrying")
    return _seed(session)


def _seed(session: Session) -> SeedResult:
    repository = RoleRepository(session)

    roles = {}
    roles_created = 0
    for name, slug in DEFAULT_ROLES:
        role, created = repository.ensure_role(name=name, slug=slug)
        roles[slug] = role
        roles_created += int(created)

    permissions = {}
    permissions_created = 0
    for name, slug in DEFAULT_PERMISSIONS:
        permission, created = repository.ensure_permission(name=name, slug=slug)
        permissions[slug] = permission
        permissions_created += int(created)

    grants_created = 0
    for role_slug, permission_slugs in ROLE_PERMISSIONS.items():
        for permission_slug in permission_slugs:
            granted = repository.grant_permission(
                roles[role_slug].id, permissions[permission_slug].id
            )
            grants_created += int(granted)

    repository.commit()
    result = SeedResult(roles_created, permissions_created, grants_created)
    if roles_created or permissions_created or grants_created:
        logger.info("Seeded roles and permissions: %s", result)
    return result
