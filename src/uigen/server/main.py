"""FastAPI application for the uigen development backend."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import auth, health, projects
from .services import get_project_store

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app.state.started_at = time.monotonic()
    logger.info("uigen backend %s up with %d stored projects", __version__, get_project_store().count())
    yield


def create_app(cors_origins: list[str] | None = None) -> FastAPI:
    """Build the backend serving projects and development credential checks.

    Args:
        cors_origins: Origins allowed to call the API; the browser app URL in
            practice (None = allow all)
    """
    app = FastAPI(
        title="uigen backend",
        description="Projects and shape-only sign-in for local uigen development",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(projects.router, prefix=f"{API_PREFIX}/projects", tags=["Projects"])
    app.include_router(auth.router, prefix=f"{API_PREFIX}/auth", tags=["Auth"])
    return app


app = create_app()
