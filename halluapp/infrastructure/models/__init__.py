"""ORM models used by the application infrastructure."""

from .permission import PermissionModel
from .role import RoleModel, permission_role_table, role_user_table
from .user import UserModel
from .invitation import InvitationModel

__all__ = [
    "InvitationModel",
    "PermissionModel",
    "RoleModel",
    "UserModel",
    "permission_role_table",
    "role_user_table",
]
