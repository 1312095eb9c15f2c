"""Aggregate application use cases."""

from .catalog import get_category, list_categories
from .invitations import create_invitation, list_invitations
from .users import authenticate_user, login_with_identity, register_user

__all__ = [
    "authenticate_user",
    "create_invitation",
    "get_category",
    "list_categories",
    "list_invitations",
    "login_with_identity",
    "register_user",
]
