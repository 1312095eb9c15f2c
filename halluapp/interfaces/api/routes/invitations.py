"""Admin endpoints for managing onboarding invitations."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from halluapp.application.use_cases.invitations import (
    create_invitation,
    delete_invitation,
    list_invitations,
)
from halluapp.config import Settings, get_settings
from halluapp.domain.entities import User
from halluapp.infrastructure.database import get_db
from halluapp.infrastructure.qr import render_qr_svg_base64
from halluapp.interfaces.api.dependencies import require_admin
from halluapp.interfaces.api.routes_helpers import http_error_from, to_invitation_read
from halluapp.interfaces.api.schemas import (
    InvitationCreate,
    InvitationCreated,
    InvitationPageRead,
)

router = APIRouter(
    prefix="/invitations",
    tags=["invitations"],
    dependencies=[Depends(require_admin)],
)
logger = logging.getLogger(__name__)


@router.get("", response_model=InvitationPageRead)
def index(
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> InvitationPageRead:
    """Return a page of invitations, newest first."""

    result = list_invitations(db, page=page, per_page=settings.invitations_per_page)
    return InvitationPageRead(
        data=[to_invitation_read(item, base_url=settings.app_url) for item in result.items],
        current_page=result.page,
        per_page=result.per_page,
        total=result.total,
        last_page=result.last_page,
    )


@router.post("", response_model=InvitationCreated, status_code=status.HTTP_201_CREATED)
def store(
    payload: InvitationCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: User = Depends(require_admin),
) -> InvitationCreated:
    """Create an invitation and return it with its invite link and QR code."""

    try:
        invitation = create_invitation(
            db,
            created_by=current_user.id,
            role_slug=payload.role_slug,
            redirect_url=payload.redirect_url,
            expires_at=payload.expires_at,
            max_attempts=settings.invitation_code_max_attempts,
        )
    except ValueError as exc:
        raise http_error_from(exc) from exc

    invite_url = invitation.invite_url(settings.app_url)
    return InvitationCreated(
        invitation=to_invitation_read(invitation, base_url=settings.app_url),
        qr_code=render_qr_svg_base64(invite_url),
        invite_url=invite_url,
    )


@router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
def destroy(invitation_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delete_invitation(db, invitation_id)
    except ValueError as exc:
        raise http_error_from(exc) from exc
    logger.info("Invitation %s deleted", invitation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
