from fastapi import FastAPI

from .activity import router as activity_router
from .auth import router as auth_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(activity_router)
