"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from bookshelf import __version__
from bookshelf.api.http.app_data import ApplicationDependencies
from bookshelf.api.http.routers import book, health
from bookshelf.api.utils.app_startup import configure_logging
from bookshelf.core.services import DbManageService, DbSessionService
from bookshelf.runtime.config.config_data import ConfigData
from bookshelf.runtime.context import get_config

__all__ = ["app", "create_app"]


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, environment: str = "development"):
        super().__init__(app)
        self._environment = environment

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if self._environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Build the application for ``config`` (the active context config by default)."""
    config = config or get_config()
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, config)
        try:
            yield
        finally:
            await shutdown(app)

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Bookshelf API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    # Innermost middleware: its 500 responses still pass through CORS and security headers
    app.middleware("http")(log_requests)

    # --- CORS configuration ---
    cors = config.app.cors
    if is_production and "*" in cors.origins and cors.allow_credentials:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=cors.allow_methods,
        allow_headers=cors.allow_headers,
    )

    app.add_middleware(SecurityHeadersMiddleware, environment=config.app.environment)

    # --- Router registration ---
    app.include_router(health.router)
    app.include_router(book.router, prefix="/books", tags=["books"])

    return app


# --- Lifecycle hooks ---
async def startup(app: FastAPI, config: ConfigData) -> None:
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config.database, environment=config.app.environment)
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # Request logging middleware covers access logs
    )
