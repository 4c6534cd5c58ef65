# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import health_router, resource_routers
from .core.config import get_settings
from .core.exceptions import ResourceError, ValidationError
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database, ping_database
from .infrastructure.notifications.event_api_client import EventApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Checks that MongoDB is reachable (the one failure that stops the
    process) and starts the event API client's background refresh task.
    """
    settings = get_settings()

    if settings.mongo_startup_check:
        try:
            await ping_database()
        except Exception as e:
            logger.critical(f"Cannot reach MongoDB at startup: {e}")
            raise

    event_api_client: Optional[EventApiClient] = None
    if set(settings.event_resources) & set(settings.enabled_resources):
        event_api_client = get_container().get(EventApiClient)
        event_api_client.start()

    yield

    if event_api_client is not None:
        try:
            await event_api_client.stop()
        except Exception as e:
            logger.error(f"Error stopping event API client: {e}", exc_info=True)

    close_database()
    logger.info("Application shutdown complete")


async def resource_error_handler(request: Request, exception: ResourceError) -> JSONResponse:
    if exception.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exception.message}")
    return JSONResponse(status_code=exception.status_code, content=exception.to_dict())


async def request_validation_error_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    error = ValidationError(
        "Invalid request input",
        details={"errors": jsonable_encoder(exception.errors())},
    )
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_error_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exception.status_code,
        content={"error": str(exception.detail).lower(), "message": str(exception.detail)},
        headers=getattr(exception, "headers", None),
    )


async def log_requests(request: Request, call_next):
    """
    Log request start and completion; turn unexpected exceptions into 500.

    An error in one request never takes the process down.
    """
    started = time.perf_counter()
    logger.debug(f"--> {request.method} {request.url.path}")
    try:
        response = await call_next(request)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.error(
            f"Unhandled error on {request.method} {request.url.path} after {elapsed_ms:.1f}ms: {e}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "internal error", "message": "An internal server error occurred"},
        )
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
    return response


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging configuration
    - CORS middleware and request logging
    - Error handlers for domain, validation and HTTP errors
    - Routes for /health and every enabled resource collection

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Sensestr Resource API",
        version="1.0.0",
        description="Devices, sessions and viewers with owner-based access control",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["Accept"],
        max_age=60,
    )
    application.middleware("http")(log_requests)

    application.add_exception_handler(ResourceError, resource_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)

    application.include_router(health_router)
    for name in settings.enabled_resources:
        router = resource_routers.get(name)
        if router is None:
            logger.warning(f"Unknown resource '{name}' in ENABLED_RESOURCES, skipping")
            continue
        application.include_router(router, prefix=f"/{name}")
        logger.info(f"Mounted /{name}")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
