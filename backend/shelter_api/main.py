"""Lambda Shelter API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Resource routers receive their repositories as dependency providers
    - Global error handlers map ShelterError -> {"message": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests pass fake repository providers, `app` wires SQL ones
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - JSON bodies parsed per route by FastAPI; unparseable bodies become 400
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelter_api.api.dependencies import get_adopter_repository, get_dog_repository
from shelter_api.api.error_handlers import register_error_handlers
from shelter_api.api.routes import health, welcome
from shelter_api.api.routes.adopters import build_adopters_router
from shelter_api.api.routes.dogs import build_dogs_router
from shelter_api.api.routes.resource_routes import RepositoryProvider
from shelter_api.config import get_settings
from shelter_api.infrastructure.database import close_db, init_db
from shelter_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{settings.service_name} started")
    yield
    await close_db()
    logger.info(f"{settings.service_name} shutting down")


def create_app(
    adopter_repository: RepositoryProvider = get_adopter_repository,
    dog_repository: RepositoryProvider = get_dog_repository,
) -> FastAPI:
    """Assemble the application around the given repository providers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(build_adopters_router(adopter_repository))
    app.include_router(build_dogs_router(dog_repository))
    app.include_router(health.router)
    app.include_router(welcome.router)
    return app


app = create_app()
