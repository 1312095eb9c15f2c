from fastapi import FastAPI

from .auth import router as auth_router
from .catalog import router as catalog_router
from .identity import router as identity_router
from .invitations import router as invitations_router
from .pages import router as pages_router
from .profile import router as profile_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(pages_router)
    app.include_router(catalog_router)
    app.include_router(auth_router)
    app.include_router(identity_router)
    app.include_router(profile_router)
    app.include_router(invitations_router)
