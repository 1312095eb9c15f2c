"""Domain entities for the service catalog."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubCategory:
    subcategory_id: int
    name: str
    image_url: str


@dataclass(frozen=True)
class Category:
    """A top-level service category and the services listed under it."""

    category_id: int
    name: str
    image_url: str
    subcategories: list[SubCategory] = field(default_factory=list)


__all__ = ["Category", "SubCategory"]
