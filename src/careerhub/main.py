"""Main FastAPI application."""

import logging

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from careerhub import config
from careerhub.routes import router
from careerhub.store import SafetyStore, create_store_client


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncGenerator[None, None]:  # pragma: no cover
    """
    Lifespan context manager for FastAPI application.

    Creates the Supabase-backed safety store on startup when credentials are
    configured and releases it on shutdown.
    """
    application.state.store = None

    if config.settings.store_configured:
        logger.info("Connecting to Supabase store...")
        client = await create_store_client(config.settings)
        application.state.store = SafetyStore(client)
        logger.info(f"Safety store ready, logging to table '{config.settings.safety_logs_table}'")
    else:
        logger.info("Supabase credentials not configured, store-backed routes are disabled")

    yield

    logger.info("Shutting down application...")
    application.state.store = None


app = FastAPI(
    title="CareerHub - Content Safety API",
    description="Content safety checks, validation and duplicate detection",
    version="0.1.0",
    lifespan=lifespan,
)

# Include API router
app.include_router(router)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {"message": "Content Safety API", "version": "0.1.0"}


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    store = getattr(app.state, "store", None)

    if store is not None:
        return {
            "status": "healthy",
            "store_configured": True,
            "safety_logs_table": store.logs_table,
            "similarity_threshold": store.similarity_threshold,
        }
    else:
        return {
            "status": "healthy",
            "store_configured": False,
            "safety_logs_table": None,
        }


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "careerhub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
