"""Domain entities exposed by the application."""

from .category import Category, SubCategory
from .identity import ExternalIdentity
from .invitation import (
    INVITATION_CODE_LENGTH,
    Invitation,
    InvitationCreator,
    build_invite_url,
)
from .permission import Permission
from .role import (
    ADMIN_ROLE_SLUG,
    CUSTOMER_ROLE_SLUG,
    SERVICE_PROVIDER_ROLE_SLUG,
    Role,
)
from .user import User

__all__ = [
    "ADMIN_ROLE_SLUG",
    "CUSTOMER_ROLE_SLUG",
    "SERVICE_PROVIDER_ROLE_SLUG",
    "INVITATION_CODE_LENGTH",
    "Category",
    "ExternalIdentity",
    "Invitation",
    "InvitationCreator",
    "Permission",
    "Role",
    "SubCategory",
    "User",
    "build_invite_url",
]
