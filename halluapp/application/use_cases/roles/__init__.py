"""Use cases for roles and permissions."""

from .seed_roles import SeedResult, seed_roles_and_permissions

__all__ = ["SeedResult", "seed_roles_and_permissions"]
