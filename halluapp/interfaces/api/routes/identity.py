"""Sign-in through the external identity provider (Firebase)."""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from halluapp.application.use_cases.users import login_with_identity
from halluapp.config import Settings, get_settings
from halluapp.domain.entities import ExternalIdentity
from halluapp.domain.exceptions import AuthenticationError
from halluapp.infrastructure.database import get_db
from halluapp.infrastructure.identity import IdentityVerifier
from halluapp.interfaces.api.dependencies import bearer_scheme, get_identity_verifier
from halluapp.interfaces.api.routes_helpers import (
    http_error_from,
    start_session,
    to_user_read,
)
from halluapp.interfaces.api.schemas import IdentityLoginRequest, SessionResponse

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


def _resolve_identity(
    token: str | None,
    payload: IdentityLoginRequest,
    settings: Settings,
    verifier: IdentityVerifier,
) -> ExternalIdentity:
    if token:
        verified = verifier.verify(token)
        # The email always comes from the verified token; only the display
        # name may be supplied by the client.
        return ExternalIdentity(
            uid=verified.uid,
            email=verified.email,
            name=payload.name or verified.name,
        )

    if not settings.trust_client_identity_claims:
        raise AuthenticationError("An identity token is required")
    if not payload.firebase_uid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="The firebase_uid field is required",
        )
    return ExternalIdentity(
        uid=payload.firebase_uid,
        email=payload.email,
        name=payload.name,
    )


@router.post("/firebase-login", response_model=SessionResponse)
@router.post("/auth/firebase", response_model=SessionResponse)
def firebase_login(
    response: Response,
    payload: IdentityLoginRequest | None = Body(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> SessionResponse:
    """Exchange an identity token for a local session, creating the user if needed."""

    payload = payload or IdentityLoginRequest()
    token = credentials.credentials if credentials else payload.token
    logger.info(
        "Identity login request received (token=%s, email=%s, uid=%s)",
        bool(token),
        payload.email,
        payload.firebase_uid,
    )

    try:
        identity = _resolve_identity(token, payload, settings, verifier)
        user = login_with_identity(
            db, identity, default_role_slug=settings.default_role_slug
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Could not persist the user for an identity login")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred during authentication",
        ) from exc

    access_token = start_session(response, user, settings)
    logger.info(
        "User %s authenticated with roles %s", user.id, [role.slug for role in user.roles]
    )
    return SessionResponse(
        user=to_user_read(user),
        message="Authentication successful",
        access_token=access_token,
    )
