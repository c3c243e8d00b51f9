# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskr import __version__
from taskr.config import settings
from taskr.database import engine
from taskr.models import Base
from taskr.rbac import get_default_checker

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    configure_logging()
    Base.metadata.create_all(bind=engine)

    # Build the role table once before serving requests
    checker = get_default_checker()
    logger.info(
        f"Loaded role table with {len(checker.table.grants)} roles"
    )

    yield

    logger.info("Shutting down")

app = FastAPI(
    title=settings.APP_NAME,
    description="Team roles and permissions for Taskr accounts",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


from taskr.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
