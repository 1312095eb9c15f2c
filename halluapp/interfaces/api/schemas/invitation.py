"""Invitation schemas."""

from datetime import datetime
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from .user import UserSummaryRead


class InvitationCreate(BaseModel):
    role_slug: Literal["customer", "service-provider"]
    expires_at: datetime | None = None
    redirect_url: str | None = Field(default=None, max_length=2048)

    @field_validator("redirect_url")
    @classmethod
    def _validate_redirect_url(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        value = value.strip()
        parsed = urlparse(value)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("The redirect URL must be an absolute http(s) URL")
        return value


class InvitationRead(BaseModel):
    id: int
    code: str
    role_slug: str
    redirect_url: str | None
    is_used: bool
    is_valid: bool
    expires_at: datetime | None
    created_at: datetime | None
    created_by: int
    creator: UserSummaryRead | None
    invite_url: str


class InvitationCreated(BaseModel):
    invitation: InvitationRead
    qr_code: str = Field(..., description="Base64 encoded SVG QR code of the invite URL")
    invite_url: str


class InvitationPageRead(BaseModel):
    data: list[InvitationRead]
    current_page: int
    per_page: int
    total: int
    last_page: int
