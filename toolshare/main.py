"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from toolshare.api import router as api_router
from toolshare.core.config import Settings, get_settings
from toolshare.core.errors import ApiError, InternalError, MethodNotAllowed, NotFound
from toolshare.services.registry import build_repositories

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Content-Type": "application/json",
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def error_response(error: ApiError) -> JSONResponse:
    return JSONResponse({"error": error.message}, status_code=error.status_code)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open (and seed if absent) every store before serving requests."""
    app.state.repositories = build_repositories(app.state.settings)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Toolshare API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def apply_cors_headers(request: Request, call_next):
        """Attach the fixed CORS headers to every response, including unexpected failures."""
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error for %s %s", request.method, request.url.path)
            response = error_response(InternalError())
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %r", request.method, request.url.path, exc)
        return error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 405:
            return error_response(MethodNotAllowed())
        if exc.status_code == 404:
            return error_response(NotFound())
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get(f"{settings.API_PREFIX}/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Toolshare API"}

    return app


app = create_app()
