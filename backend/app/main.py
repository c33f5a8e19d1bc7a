"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import api_router, auth_router
from app.core.config import get_settings
from app.core.errors import TaskboardError
from app.db.store import RecordStore
from app.middleware.access_log import AccessLogMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.services.sessions import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.store = RecordStore(settings.data_dir)
    app.state.sessions = SessionStore(settings.session_idle_seconds)
    yield


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_taskboard_error(_: Request, exc: TaskboardError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed: %s", exc.message, exc_info=exc)
    return _error(exc.status_code, exc.message)


async def handle_http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body: %s", exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, "invalid request body")


async def handle_unexpected_error(_: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error: %s", exc, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal error")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskboardError, handle_taskboard_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(auth_router)
    app.include_router(api_router)

    # Serve the browser client if configured; API routes are registered first and take precedence
    static_dir = settings.static_dir
    if static_dir is not None and static_dir.is_dir():
        dashboard = static_dir / "dashboard.html"

        @app.get("/dashboard", include_in_schema=False)
        async def dashboard_page() -> FileResponse:
            return FileResponse(dashboard)

        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


app = create_app()
