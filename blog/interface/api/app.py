"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog.config import Settings
from blog.domain.error import StorageUnavailableError
from blog.interface.api.routes import comments, health, likes, posts, taxonomy
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


async def storage_unavailable_handler(
    request: Request, exc: StorageUnavailableError
) -> JSONResponse:
    """Map storage outages to 503 on every route."""
    logfire.error(
        "Request failed - storage unavailable",
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage temporarily unavailable"},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    logfire.warn("Malformed request", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built from mock
            providers); the production container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog Service API",
        description="Posts, comments, likes, tags and categories",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(
        StorageUnavailableError, storage_unavailable_handler
    )
    app_instance.add_exception_handler(
        RequestValidationError, request_validation_handler
    )

    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(taxonomy.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
