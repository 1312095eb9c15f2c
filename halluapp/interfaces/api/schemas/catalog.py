"""Catalog and page schemas."""

from pydantic import BaseModel, ConfigDict

from .user import UserRead


class SubCategoryRead(BaseModel):
    subcategory_id: int
    name: str
    image_url: str

    model_config = ConfigDict(from_attributes=True)


class CategoryRead(BaseModel):
    category_id: int
    name: str
    image_url: str
    subcategories: list[SubCategoryRead]

    model_config = ConfigDict(from_attributes=True)


class AuthState(BaseModel):
    user: UserRead | None


class AppInfo(BaseModel):
    can_login: bool = True
    can_register: bool = True


class HomePage(BaseModel):
    auth: AuthState
    current_route: str
    app: AppInfo
    categories: list[CategoryRead]


class DashboardPage(BaseModel):
    auth: AuthState
    current_route: str
