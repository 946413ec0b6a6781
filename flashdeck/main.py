"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flashdeck.config import Settings, configure_logging, get_settings
from flashdeck.database import create_tables, dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from flashdeck.domain.learning.exceptions import InvalidRatingError, NoCardsAvailableError
from flashdeck.exceptions import (
    FlashdeckError,
    NotFoundError,
    PersistenceError,
    ServiceError,
    ValidationError,
)
from flashdeck.infrastructure.learning.routers import flashcards, study_sessions

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})


def _flashdeck_error_code(exc: FlashdeckError) -> str:
    if isinstance(exc, PersistenceError):
        return "persistence_failure"
    if isinstance(exc, ServiceError):
        return "internal_error"
    if isinstance(exc, NotFoundError):
        return "not_found"
    if isinstance(exc, ValidationError):
        return "validation_error"
    return "error"


async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning("request_failed", path=request.url.path, error=exc.message)
    return _error_response(exc.status_code, exc.message, _flashdeck_error_code(exc))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if isinstance(exc, NoCardsAvailableError):
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.rule)
    if isinstance(exc, EntityNotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message, "not_found")
    if isinstance(exc, InvalidRatingError):
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_CONTENT, exc.message, "invalid_rating"
        )
    if isinstance(exc, BusinessRuleViolationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, exc.rule)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.message, "domain_error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    initialize_database(settings)
    create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(
        FlashdeckError, flashdeck_error_handler  # type: ignore[arg-type]
    )
    application.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    application.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)
    application.include_router(study_sessions.router, prefix=settings.API_V1_PREFIX)

    @application.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return application


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run("flashdeck.main:app", host="0.0.0.0", port=8000)  # noqa: S104
