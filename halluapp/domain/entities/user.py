"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime

from .role import ADMIN_ROLE_SLUG, CUSTOMER_ROLE_SLUG, SERVICE_PROVIDER_ROLE_SLUG, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password: str
    firebase_uid: str | None = None
    roles: list[Role] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, slug: str) -> bool:
        """Return ``True`` when one of the user's roles has the given slug."""

        return any(role.slug == slug for role in self.roles)

    def has_permission(self, slug: str) -> bool:
        """Return ``True`` when any of the user's roles grants ``slug``."""

        return any(role.grants(slug) for role in self.roles)

    def is_admin(self) -> bool:
        return self.has_role(ADMIN_ROLE_SLUG)

    def is_customer(self) -> bool:
        return self.has_role(CUSTOMER_ROLE_SLUG)

    def is_service_provider(self) -> bool:
        return self.has_role(SERVICE_PROVIDER_ROLE_SLUG)
