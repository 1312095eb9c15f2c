"""Use case for listing invitations page by page."""

from dataclasses import dataclass
import math

from sqlalchemy.orm import Session

from halluapp.domain.entities import Invitation
from halluapp.infrastructure.repositories import InvitationRepository


@dataclass(frozen=True)
class InvitationPage:
    items: list[Invitation]
    total: int
    page: int
    per_page: int

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))


def list_invitations(session: Session, *, page: int = 1, per_page: int = 10) -> InvitationPage:
    """Return the requested page of invitations, newest first."""

    if page < 1 or per_page < 1:
        raise ValueError("page and per_page must be positive")

    repository = InvitationRepository(session)
    items = list(repository.list(skip=(page - 1) * per_page, limit=per_page))
    return InvitationPage(items=items, total=repository.count(), page=page, per_page=per_page)
