import logging
import uuid
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import forms
from .errors import ClientFilterError, MalformedInputError, UpstreamError
from .schemas.error import ErrorType, ValidationErrorDetail
from .settings import get_settings
from .utils.error_responses import (
    build_error_response,
    build_validation_error_response,
)
from .utils.request_context import get_request_id, set_request_id

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level_numeric,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def validate_environment() -> None:
    """Log warnings for optional configuration that was left unset."""
    warnings = get_settings().optional_config_warnings()

    if warnings:
        logger.warning("=" * 60)
        logger.warning("Environment Configuration Warnings:")
        for warning in warnings:
            logger.warning(f"  • {warning}")
        logger.warning("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared upstream HTTP client for the lifetime of the app."""
    validate_environment()

    logger.info("Filtered Responses API - upstream %s", settings.normalized_upstream_base_url)

    async with httpx.AsyncClient() as http_client:
        app.state.http_client = http_client
        yield

    logger.info("Shutting down Filtered Responses API")


app = FastAPI(
    title="Filtered Responses API",
    version="0.1.0",
    description="Filters and re-paginates form submissions fetched from a paginated submissions API.",
    lifespan=lifespan,
    redirect_slashes=False,
)

if settings.cors_allow_origins:
    logger.info("Configured CORS allow_origins: %s", ", ".join(settings.cors_allow_origins))
if settings.cors_allow_origin_regex:
    logger.info("Configured CORS allow_origin_regex: %s", settings.cors_allow_origin_regex)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_origin_regex=settings.cors_allow_origin_regex,
)


# Middleware to add request ID to each request
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add unique request ID to each request for tracking."""
    request_id = str(uuid.uuid4())
    set_request_id(request_id)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors."""
    errors = [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(errors),
    )

    error_response = build_validation_error_response(
        message="Request validation failed",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        path=str(request.url.path),
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(ClientFilterError)
async def client_filter_exception_handler(request: Request, exc: ClientFilterError):
    """Handle filters that cannot be applied to the fetched submissions."""
    logger.warning(
        "Filter error for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        exc.message,
    )

    error_response = build_error_response(
        error_type=ErrorType.FILTER_ERROR,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(MalformedInputError)
async def malformed_input_exception_handler(request: Request, exc: MalformedInputError):
    """Handle a ``filters`` payload that is not a list of filter objects."""
    logger.warning(
        "Malformed filters for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        exc.message,
    )

    error_response = build_error_response(
        error_type=ErrorType.MALFORMED_INPUT,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(UpstreamError)
async def upstream_exception_handler(request: Request, exc: UpstreamError):
    """Relay submissions API failures with the upstream status code."""
    logger.error(
        "Upstream error for request %s to %s (%s): %s",
        get_request_id(),
        request.url.path,
        exc.status_code,
        exc.message,
    )

    error_response = build_error_response(
        error_type=ErrorType.UPSTREAM_ERROR,
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle all other unhandled exceptions."""
    logger.exception(
        "Unhandled exception for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        type(exc).__name__,
    )

    error_response = build_error_response(
        error_type=ErrorType.INTERNAL_ERROR,
        message=f"An unexpected error occurred: {type(exc).__name__}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        path=str(request.url.path),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(mode="json"),
    )


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple health endpoint for readiness checks."""
    return {"status": "ok"}


app.include_router(forms.router, prefix="/api/forms", tags=["forms"])
