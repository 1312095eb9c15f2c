"""Endpoints for the signed-in user's own profile."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from halluapp.application.use_cases.users import delete_user, update_profile
from halluapp.config import Settings, get_settings
from halluapp.domain.entities import User
from halluapp.infrastructure.database import get_db
from halluapp.interfaces.api.dependencies import get_current_user
from halluapp.interfaces.api.routes_helpers import end_session, http_error_from, to_user_read
from halluapp.interfaces.api.schemas import ProfileDelete, ProfileUpdate, UserRead

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=UserRead)
def read_profile(current_user: User = Depends(get_current_user)) -> UserRead:
    return to_user_read(current_user)


@router.patch("", response_model=UserRead)
def edit_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    """Update the name and/or email of the signed-in user."""

    try:
        user = update_profile(
            db,
            user_id=current_user.id,
            name=payload.name,
            email=payload.email,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc
    return to_user_read(user)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def destroy_profile(
    payload: ProfileDelete,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(get_current_user),
) -> Response:
    """Delete the signed-in user's account once the password is confirmed."""

    try:
        delete_user(db, current_user.id, password=payload.password)
    except ValueError as exc:
        raise http_error_from(exc) from exc

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    end_session(response, settings)
    return response
