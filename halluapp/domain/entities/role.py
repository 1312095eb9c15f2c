"""Domain entity representing a user role."""

from dataclasses import dataclass, field

from .permission import Permission

ADMIN_ROLE_SLUG = "admin"
CUSTOMER_ROLE_SLUG = "customer"
SERVICE_PROVIDER_ROLE_SLUG = "service-provider"


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int | None
    name: str
    slug: str
    permissions: list[Permission] = field(default_factory=list)

    def grants(self, permission_slug: str) -> bool:
        return any(permission.slug == permission_slug for permission in self.permissions)


__all__ = [
    "ADMIN_ROLE_SLUG",
    "CUSTOMER_ROLE_SLUG",
    "SERVICE_PROVIDER_ROLE_SLUG",
    "Role",
]
