from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from weathermood.api.v1.endpoints.dashboard import limiter
from weathermood.api.v1.router import api_v1_router
from weathermood.core.config import get_settings
from weathermood.core.http import create_http_client, set_http_client
from weathermood.core.logging import configure_logging
from weathermood.services.settings_store import InvalidThresholdsError
from weathermood.services.weather.location import LocationUnavailableError


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    client = create_http_client(settings)
    set_http_client(client)

    app.state.settings = settings

    try:
        yield
    finally:
        set_http_client(None)
        await client.aclose()


async def _location_unavailable_handler(request: Request, exc: LocationUnavailableError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": f"Location unavailable: {exc}"})


async def _invalid_thresholds_handler(request: Request, exc: InvalidThresholdsError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": exc.reason})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="weathermood api",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(LocationUnavailableError, _location_unavailable_handler)
    app.add_exception_handler(InvalidThresholdsError, _invalid_thresholds_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()
