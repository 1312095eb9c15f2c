"""Endpoints for local credential registration, login and logout."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from halluapp.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user,
)
from halluapp.config import Settings, get_settings
from halluapp.infrastructure.database import get_db
from halluapp.interfaces.api.routes_helpers import (
    end_session,
    http_error_from,
    start_session,
    to_user_read,
)
from halluapp.interfaces.api.schemas import LoginRequest, RegisterRequest, SessionResponse

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    """Create an account, optionally redeeming an invitation code, and sign it in."""

    try:
        user = register_user(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            default_role_slug=settings.default_role_slug,
            invitation_code=payload.code,
        )
    except IntegrityError as exc:
        db.rollback()
        logger.info("Registration for %s lost a race on a unique field", payload.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="The email has already been taken",
        ) from exc
    except ValueError as exc:
        db.rollback()
        raise http_error_from(exc) from exc

    access_token = start_session(response, user, settings)
    return SessionResponse(
        user=to_user_read(user),
        message="Registration successful",
        access_token=access_token,
    )


@router.post("/login", response_model=SessionResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    """Sign in with email and password."""

    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Failed login attempt for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="These credentials do not match our records.",
        )

    access_token = start_session(response, user, settings)
    return SessionResponse(
        user=to_user_read(user),
        message="Authentication successful",
        access_token=access_token,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(settings: Settings = Depends(get_settings)) -> Response:
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    end_session(response, settings)
    return response
