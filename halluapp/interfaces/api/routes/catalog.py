"""Catalog browsing endpoints."""

from fastapi import APIRouter

from halluapp.application.use_cases import get_category, list_categories
from halluapp.domain.exceptions import NotFoundError
from halluapp.interfaces.api.routes_helpers import http_error_from
from halluapp.interfaces.api.schemas import CategoryRead

router = APIRouter(prefix="/categories", tags=["catalog"])


@router.get("", response_model=list[CategoryRead])
def read_categories() -> list[CategoryRead]:
    return [CategoryRead.model_validate(category) for category in list_categories()]


@router.get("/{category_id}", response_model=CategoryRead)
def read_category(category_id: int) -> CategoryRead:
    """Return a category together with its subcategories."""

    try:
        category = get_category(category_id)
    except NotFoundError as exc:
        raise http_error_from(exc) from exc
    return CategoryRead.model_validate(category)
