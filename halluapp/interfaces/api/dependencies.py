"""FastAPI dependency utilities."""

from dataclasses import dataclass
import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from halluapp.config import Settings, get_settings
from halluapp.domain.entities import User
from halluapp.infrastructure.database import get_db
from halluapp.infrastructure.identity import FirebaseIdentityVerifier, IdentityVerifier
from halluapp.infrastructure.repositories import UserRepository
from halluapp.infrastructure.security import decode_access_token, password_signature
from halluapp.interfaces.api.errors import LoginRequired

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHENTICATED = "Unauthenticated."
ADMIN_REQUIRED = "Unauthorized. Admin access required."


@dataclass(frozen=True)
class AuthContext:
    """Who is making the current request; ``user`` is ``None`` for guests."""

    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


def resolve_session_user(token: str, db: Session) -> User | None:
    """Return the user a session token belongs to, or ``None`` when it is stale."""

    try:
        payload = decode_access_token(token)
    except ValueError:
        return None

    subject = payload.get("sub")
    signature = payload.get("pwd_sig")
    if not isinstance(subject, str) or not subject.isdigit() or not isinstance(signature, str):
        return None

    user = UserRepository(db).get(int(subject))
    if user is None:
        return None
    # Tokens issued before a password change stop working.
    if signature != password_signature(user.password):
        return None
    return user


def get_auth_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthContext:
    """Build the per-request authentication context from the bearer header or cookie."""

    token = credentials.credentials if credentials else request.cookies.get(
        settings.session_cookie_name
    )
    user = resolve_session_user(token, db) if token else None
    context = AuthContext(user=user)
    request.state.auth = context
    return context


def get_current_user(context: AuthContext = Depends(get_auth_context)) -> User:
    """Return the signed-in user or send the client to the login page."""

    if context.user is None:
        raise LoginRequired(status.HTTP_401_UNAUTHORIZED, UNAUTHENTICATED)
    return context.user


def require_admin(context: AuthContext = Depends(get_auth_context)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if context.user is None:
        raise LoginRequired(status.HTTP_403_FORBIDDEN, ADMIN_REQUIRED)
    if not context.user.is_admin():
        logger.info("User %s denied access to an admin route", context.user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ADMIN_REQUIRED)
    return context.user


def get_identity_verifier(settings: Settings = Depends(get_settings)) -> IdentityVerifier:
    """Return the verifier used for external identity tokens."""

    return FirebaseIdentityVerifier(settings)
