"""FastAPI application entry point."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from decaf import __version__
from decaf.api import auth, cats, recipes, tags, user_preferences
from decaf.config import Settings, get_settings
from decaf.database import build_engine, build_session_factory, init_db
from decaf.errors import AppError, AuthError

logger = logging.getLogger("decaf")


def configure_logging(settings: Settings) -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map business errors, validation errors and crashes onto JSON responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(
            status_code=exc.status_code, content={"detail": exc.message}, headers=headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        # Don't expose internal errors outside development
        message = str(exc) if settings.is_development else "Internal Server Error"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": message}
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit settings object."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Set up logging and the database on startup; dispose of the engine on shutdown."""
        configure_logging(settings)
        engine = build_engine(settings.database_url)
        init_db(engine)
        app.state.session_factory = build_session_factory(engine)
        logger.info(f"DECAF API started ({settings.environment})")
        yield
        engine.dispose()

    app = FastAPI(
        title="DECAF API",
        description="Does Every Coffee Action, Friend",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"{response.status_code} in {elapsed_ms:.1f}ms"
        )
        return response

    register_exception_handlers(app, settings)

    # Register routers
    for module in (auth, cats, recipes, tags, user_preferences):
        app.include_router(module.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Service information."""
        return {
            "name": "DECAF API",
            "description": "Does Every Coffee Action, Friend",
            "version": __version__,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "environment": settings.environment,
        }

    return app


app = create_app()
