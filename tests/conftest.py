"""Shared fixtures: an isolated SQLite database and a FastAPI test client."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "halluapp_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_URL"] = "http://testserver"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["TRUST_CLIENT_IDENTITY_CLAIMS"] = "false"

from halluapp.config import get_settings  # noqa: E402

get_settings.cache_clear()

from halluapp.application.use_cases.roles import seed_roles_and_permissions  # noqa: E402
from halluapp.domain.entities import User  # noqa: E402
from halluapp.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from halluapp.infrastructure.repositories import RoleRepository, UserRepository  # noqa: E402
from halluapp.infrastructure.security import (  # noqa: E402
    create_session_token,
    get_password_hash,
)


@pytest.fixture()
def database() -> Iterator[None]:
    """Create the schema and the default roles, and drop everything afterwards."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    with SessionLocal() as session:
        seed_roles_and_permissions(session)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(database) -> Iterator:
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def app(database):
    from main import create_app

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(database) -> Callable[..., User]:
    """Insert a user with a known password and the given role slugs."""

    def _make_user(
        *,
        email: str,
        name: str = "Test User",
        password: str = "Secret123",
        roles: tuple[str, ...] = ("customer",),
        firebase_uid: str | None = None,
    ) -> User:
        with SessionLocal() as session:
            role_repository = RoleRepository(session)
            role_entities = [role_repository.get_by_slug(slug) for slug in roles]
            return UserRepository(session).create(
                User(
                    id=None,
                    name=name,
                    email=email,
                    password=get_password_hash(password),
                    firebase_uid=firebase_uid,
                    roles=[role for role in role_entities if role is not None],
                )
            )

    return _make_user


def auth_headers(user: User) -> dict[str, str]:
    """Return headers carrying a session token for ``user``."""

    token = create_session_token(user.id, user.password)
    return {"Authorization": f"Bearer {token}", "Accept": "application/json"}


@pytest.fixture()
def admin_user(make_user) -> User:
    return make_user(email="admin@example.com", name="Admin", roles=("admin",))


@pytest.fixture()
def customer_user(make_user) -> User:
    return make_user(email="customer@example.com", name="Customer", roles=("customer",))


@pytest.fixture()
def headers_for() -> Callable[[User], dict[str, str]]:
    return auth_headers
