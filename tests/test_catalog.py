"""Tests for the static service catalog."""

import pytest

from halluapp.application.use_cases import get_category, list_categories
from halluapp.domain.exceptions import NotFoundError


def test_catalog_lists_categories_with_subcategories() -> None:
    categories = list_categories()

    assert categories
    assert all(category.subcategories for category in categories)
    ids = [category.category_id for category in categories]
    assert len(ids) == len(set(ids))


def test_get_category_by_id() -> None:
    category = get_category(1)

    assert category.name == "Home Cleaning"
    assert 101 in {sub.subcategory_id for sub in category.subcategories}


def test_unknown_category_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        get_category(9999)
