"""Security helpers for password hashing and session tokens."""

from datetime import datetime, timedelta, timezone
from hashlib import sha256
import secrets

from jose import JWTError, jwt
from passlib.context import CryptContext

from halluapp.config import get_settings

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)

ALGORITHM = "HS256"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_placeholder_password() -> str:
    """Return a hashed random password for accounts that sign in externally.

    Nobody knows the plain value, so the account cannot be used with local
    credentials until the user sets a password.
    """

    return get_password_hash(secrets.token_urlsafe(32))


def password_signature(hashed_password: str) -> str:
    """Fingerprint of the stored hash; changes whenever the password changes."""

    return sha256(hashed_password.encode()).hexdigest()


settings = get_settings()


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(tz=timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_session_token(user_id: int, hashed_password: str) -> str:
    """Issue the token that identifies a signed-in user."""

    return create_access_token(
        {"sub": str(user_id), "pwd_sig": password_signature(hashed_password)}
    )
