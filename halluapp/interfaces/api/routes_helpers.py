"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, Response, status

from halluapp.config import Settings
from halluapp.domain.entities import Invitation, User
from halluapp.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidInvitationError,
    MissingEmailClaimError,
    NotFoundError,
)
from halluapp.infrastructure.security import create_session_token
from halluapp.interfaces.api.schemas import InvitationRead, UserRead, UserSummaryRead

_STATUS_BY_ERROR: tuple[tuple[type[ValueError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (InvalidInvitationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (MissingEmailClaimError, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def http_error_from(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))


def start_session(response: Response, user: User, settings: Settings) -> str:
    """Issue a session token for ``user`` and set it as an HTTP-only cookie."""

    token = create_session_token(user.id, user.password)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return token


def end_session(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def to_user_read(user: User) -> UserRead:
    return UserRead.model_validate(user)


def to_invitation_read(invitation: Invitation, *, base_url: str) -> InvitationRead:
    creator = (
        UserSummaryRead.model_validate(invitation.creator) if invitation.creator else None
    )
    return InvitationRead(
        id=invitation.id,
        code=invitation.code,
        role_slug=invitation.role_slug,
        redirect_url=invitation.redirect_url,
        is_used=invitation.is_used,
        is_valid=invitation.is_valid(),
        expires_at=invitation.expires_at,
        created_at=invitation.created_at,
        created_by=invitation.created_by,
        creator=creator,
        invite_url=invitation.invite_url(base_url),
    )
