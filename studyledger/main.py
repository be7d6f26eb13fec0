"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studyledger.config import configure_logging, get_settings
from studyledger.database import dispose_engine, initialize_database
from studyledger.domain.common.exceptions import DomainError, EntityNotFoundError
from studyledger.exceptions import StudyLedgerError, TotalFailureError
from studyledger.infrastructure.common.routers import health
from studyledger.infrastructure.learning.routers import learner_stats, study_sessions
from studyledger.infrastructure.learning.schemas import FailedReview, StudySessionFailureResponse

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize the database engine on startup and dispose it on shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    initialize_database(settings)
    yield
    dispose_engine()
    logger.info(f"Stopped {settings.PROJECT_NAME}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Spaced repetition progress engine and review ledger",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TotalFailureError)
async def total_failure_handler(request: Request, exc: TotalFailureError) -> JSONResponse:
    """Report a batch in which no review was committed, with every per-item error."""
    body = StudySessionFailureResponse(
        success=False,
        error=exc.message,
        failed_reviews=[
            FailedReview(item_id=item_id, error_type=type(error).__name__, error=error.message)
            for item_id, error in exc.failures
        ],
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(by_alias=True))


@app.exception_handler(StudyLedgerError)
async def studyledger_error_handler(request: Request, exc: StudyLedgerError) -> JSONResponse:
    """Map application errors to their HTTP status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain errors: missing entities to 404, rule violations to 400."""
    if isinstance(exc, EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message}
        )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed payloads are client errors like any other validation failure."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(health.router)
app.include_router(study_sessions.router, prefix=settings.API_V1_PREFIX)
app.include_router(learner_stats.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
