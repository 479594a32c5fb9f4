#!/usr/bin/env python3

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from airspace_explorer.models.airspace_dataset import AirspaceDataset
from airspace_explorer.models.validation import AirspaceNotFoundError
from airspace_explorer.storage.json_storage import JsonDatasetStorage

from .config import Settings, SECURITY_HEADERS
from .api import airspaces, statistics
from .api.models import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, dataset: Optional[AirspaceDataset] = None) -> FastAPI:
    """
    Build the airspace query application.

    The dataset is loaded once in the lifespan hook and attached to
    ``app.state``; route handlers get it through a dependency. A failure to
    load it propagates out of startup, so the server never serves traffic
    without data.

    Args:
        settings: Server settings, read from the environment when omitted
        dataset: Preloaded dataset; when omitted it is read from settings.data_path

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up airspace query service...")

        if dataset is not None:
            app.state.dataset = dataset
        else:
            try:
                app.state.dataset = JsonDatasetStorage(settings.data_path).load()
            except Exception as e:
                logger.error(f"Failed to load airspace dataset: {e}")
                raise

        app.state.started_at = time.monotonic()
        logger.info(f"Serving {len(app.state.dataset)} airspaces")

        yield

        logger.info("Shutting down airspace query service...")

    app = FastAPI(
        title="Airspace Explorer",
        description="Mock API serving synthetic airspace shapes filtered by viewport",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dataset = None

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        client_ip = request.client.host if request.client else "unknown"
        logger.info(
            f"{request.method} {request.url.path} - "
            f"{response.status_code} - {process_time:.3f}s - {client_ip}"
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(AirspaceNotFoundError)
    async def airspace_not_found_handler(request: Request, exc: AirspaceNotFoundError):
        logger.info(f"Airspace not found: {exc.airspace_id}")
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="Airspace not found").model_dump(),
        )

    app.include_router(airspaces.router, prefix="/api/airspaces", tags=["airspaces"])
    app.include_router(statistics.router, prefix="/api/statistics", tags=["statistics"])

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint."""
        started_at = getattr(request.app.state, "started_at", None)
        uptime = time.monotonic() - started_at if started_at is not None else 0.0
        return HealthResponse(uptime=uptime)

    return app
