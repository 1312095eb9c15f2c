"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RoleRead(BaseModel):
    id: int
    name: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    firebase_uid: str | None
    roles: list[RoleRead]
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class UserSummaryRead(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None

    model_config = ConfigDict(extra="forbid")


class ProfileDelete(BaseModel):
    password: str = Field(..., min_length=1)
