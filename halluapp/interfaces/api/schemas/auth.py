"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field, model_validator

from .user import UserRead


class IdentityLoginRequest(BaseModel):
    """Body of the external identity login.

    ``token`` may also travel in the ``Authorization`` header. The remaining
    fields are only trusted on their own when the server is configured to do so.
    """

    token: str | None = Field(default=None, min_length=1)
    email: EmailStr | None = None
    name: str | None = Field(default=None, min_length=1, max_length=255)
    firebase_uid: str | None = Field(default=None, min_length=1, max_length=128)


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    password_confirmation: str
    code: str | None = Field(default=None, min_length=1, max_length=17)

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequest":
        if self.password != self.password_confirmation:
            raise ValueError("The password confirmation does not match")
        return self


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    user: UserRead
    message: str
    access_token: str
    token_type: str = "bearer"
