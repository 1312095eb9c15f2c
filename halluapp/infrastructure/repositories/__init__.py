"""Repository implementations for infrastructure layer."""

from .invitation_repository import InvitationRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "InvitationRepository",
    "RoleRepository",
    "UserRepository",
]
