# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linkhub import __version__
from linkhub.config import get_settings
from linkhub.scheduler import JobScheduler
from linkhub.schemas.common import HealthResponse
from linkhub.services.auth_service import ForbiddenError, UnauthorizedError
from linkhub.services.session_store import SessionStore

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: sessions live in memory for the lifetime of the process
    store = SessionStore(duration=timedelta(hours=settings.session_duration_hours))
    app.state.session_store = store

    scheduler = JobScheduler(settings, store)
    scheduler.start()

    yield

    # Shutdown: every session is lost, users have to log in again
    logger.info("Shutting down...")
    scheduler.stop()
    store.clear()


app = FastAPI(
    title="Linkhub",
    description="Link-in-bio profile and admin back-office",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(
    request: Request, exc: UnauthorizedError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Not authenticated"},
    )


@app.exception_handler(ForbiddenError)
async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": "Admin access required"},
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from linkhub.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
