"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .delete_user import delete_user
from .get_user import get_user
from .login_with_identity import login_with_identity
from .make_admin import AdminRoleMissingError, PromotionStatus, make_admin
from .register_user import register_user
from .update_profile import update_profile

__all__ = [
    "AdminRoleMissingError",
    "AuthenticationStatus",
    "PromotionStatus",
    "authenticate_user",
    "delete_user",
    "get_user",
    "login_with_identity",
    "make_admin",
    "register_user",
    "update_profile",
]
