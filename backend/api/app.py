"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import AuthenticationError, StorylineError
from modules.auth.routes import router as auth_router
from modules.auth.service import wait_for_background_tasks
from modules.comments.routes import create_comment_router
from modules.content.models import ContentKind
from modules.content.routes import create_content_router

from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    await wait_for_background_tasks()
    logger.info("Shutting down %s", settings.app_name)


async def storyline_error_handler(request: Request, exc: StorylineError) -> JSONResponse:
    """
    Render a StorylineError as JSON with the status of its base class.

    Client errors are logged at info level; server errors were already
    logged with a traceback where they were raised.
    """
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s %s", request.method, request.url.path, exc.code, exc.details
        )
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=headers,
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Stories, writings and comments with bearer-token auth",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(StorylineError, storyline_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(
        create_content_router(ContentKind.STORY), prefix="/api/storys", tags=["storys"]
    )
    app.include_router(
        create_content_router(ContentKind.WRITING), prefix="/api/writings", tags=["writings"]
    )
    app.include_router(
        create_comment_router(ContentKind.STORY), prefix="/api/comments", tags=["comments"]
    )
    app.include_router(
        create_comment_router(ContentKind.WRITING),
        prefix="/api/writing-comments",
        tags=["comments"],
    )

    return app


# Application instance for uvicorn
app = create_app()
