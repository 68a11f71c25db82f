import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bravo_api.config import get_settings
from bravo_api.interfaces.api.routes import register_routes
from bravo_api.infrastructure.database import initialize_database, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    )

    app = FastAPI(title="Bravo API", lifespan=lifespan)

    # Browser SPA origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
