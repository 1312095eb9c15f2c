"""Use cases for browsing the service catalog."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from halluapp.data import load_catalog
from halluapp.domain.entities import Category, SubCategory
from halluapp.domain.exceptions import NotFoundError


@lru_cache(maxsize=1)
def _categories() -> tuple[Category, ...]:
    return tuple(
        Category(
            category_id=int(raw["category_id"]),
            name=raw["name"],
            image_url=raw["image_url"],
            subcategories=[
                SubCategory(
                    subcategory_id=int(sub["subcategory_id"]),
                    name=sub["name"],
                    image_url=sub["image_url"],
                )
                for sub in raw.get("subcategories", [])
            ],
        )
        for raw in load_catalog()
    )


def list_categories() -> Sequence[Category]:
    """Return every category in catalog order."""

    return list(_categories())


def get_category(category_id: int) -> Category:
    """Return the category with ``category_id`` or raise ``NotFoundError``."""

    for category in _categories():
        if category.category_id == category_id:
            return category
    raise NotFoundError("Category not found")
