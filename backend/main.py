"""
FastAPI application entry point for the Revenue Leak Calculator API.

Configures logging and CORS, registers the calculator router, and starts the
ASGI server when run directly.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import __version__
from backend.api import api_router
from backend.core.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application startup and shutdown events.

    The engine holds no connections, so startup only loads settings (failing
    fast on invalid environment values) and logs.
    """
    settings = get_settings()
    logger.info(f"{settings.app_name} starting")

    yield

    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title="Revenue Leak Calculator API",
    version=__version__,
    description=(
        "Backend for the revenue leak calculator. "
        "Computes leakage estimates, lead scores, validation warnings, "
        "confidence levels and submission records."
    ),
    lifespan=lifespan,
)

# Configure CORS middleware for the calculator front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancer checks.

    Returns:
        Dict with status 'healthy'
    """
    return {"status": "healthy"}


@app.get("/")
async def root():
    """
    Root endpoint providing API information.

    Returns:
        Dict with API name and version
    """
    return {
        "name": get_settings().app_name,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
