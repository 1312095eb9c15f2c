"""Domain entity representing a permission."""

from dataclasses import dataclass


@dataclass
class Permission:
    """A named capability granted through roles."""

    id: int | None
    name: str
    slug: str


__all__ = ["Permission"]
