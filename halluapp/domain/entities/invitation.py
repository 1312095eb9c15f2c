"""Domain entity representing an onboarding invitation."""

from dataclasses import dataclass
from datetime import datetime

from halluapp.utils import ensure_naive_utc, utcnow

INVITATION_CODE_LENGTH = 17
REGISTRATION_PATH = "/register"


def build_invite_url(code: str, redirect_url: str | None, *, base_url: str) -> str:
    """Return the shareable link for ``code``.

    A redirect URL chosen at creation time wins over the default registration
    page. The code is appended as a plain ``?code=`` suffix in both cases.
    """

    if redirect_url:
        return f"{redirect_url}?code={code}"
    return f"{base_url.rstrip('/')}{REGISTRATION_PATH}?code={code}"


@dataclass(frozen=True)
class InvitationCreator:
    """Minimal view of the admin who generated an invitation."""

    id: int
    name: str
    email: str


@dataclass
class Invitation:
    """A single-use code that lets a new user register with a given role."""

    id: int | None
    code: str
    role_slug: str
    created_by: int
    redirect_url: str | None = None
    is_used: bool = False
    expires_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    creator: InvitationCreator | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        current = ensure_naive_utc(now) if now is not None else utcnow()
        return ensure_naive_utc(self.expires_at) < current

    def is_valid(self, now: datetime | None = None) -> bool:
        """Return ``True`` while the invitation is unused and not expired."""

        if self.is_used:
            return False
        if self.is_expired(now):
            return False
        return True

    def invite_url(self, base_url: str) -> str:
        return build_invite_url(self.code, self.redirect_url, base_url=base_url)


__all__ = [
    "INVITATION_CODE_LENGTH",
    "REGISTRATION_PATH",
    "Invitation",
    "InvitationCreator",
    "build_invite_url",
]
