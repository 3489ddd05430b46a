from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .db import open_store
from .settings import Settings, get_settings
from .routers import todos as todos_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items."},
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed or invalid request bodies as 400.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def _mount_static(app: FastAPI, static_dir: str) -> None:
    # Mounted last so /api routes always win.
    if os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; serving API only", static_dir)


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The store (one connection pool per process) is opened when the app starts
    and closed when it shuts down; routes reach it through the
    ``get_repository`` dependency.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Opening todo store at %s (pool size %d)", settings.database_path, settings.db_pool_size)
        store = open_store(settings.database_path, settings.db_pool_size)
        app.state.store = store
        try:
            yield
        finally:
            logger.info("Shutting down, closing todo store")
            store.close()

    app = FastAPI(
        title="Todo Backend",
        description="Backend API service for managing todos stored in SQLite.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )
    app.state.settings = settings

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/api/health", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy"}

    app.include_router(todos_router.router)
    _mount_static(app, settings.static_dir)
    return app


app = create_app()
