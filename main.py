from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from halluapp.application.use_cases.roles import seed_roles_and_permissions
from halluapp.config import get_settings
from halluapp.infrastructure.database import SessionLocal, engine, initialize_database
from halluapp.infrastructure.log_config import configure_logging
from halluapp.interfaces.api.errors import register_exception_handlers
from halluapp.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database on start-up and release the engine on shutdown."""

    settings = get_settings()
    initialize_database()
    if settings.seed_roles_on_startup:
        with SessionLocal() as session:
            seed_roles_and_permissions(session)
    logger.info("Halluapp API started")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Halluapp API", lifespan=lifespan)

    if settings.cors_origin_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origin_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
