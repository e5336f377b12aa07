"""Main entrypoint for the Player Service API.

Sets up the FastAPI application, middleware, error rendering and routes.

Example:
    Run the API server using uvicorn:

        uvicorn player_service.api.main:app --port 3000

Notes/Assumptions:
    - Each app built by `create_app` owns its own seeded `PlayerStore`.
    - The `app` object is created at import time so uvicorn can discover it.
    - Error responses are plain text, never JSON error objects.
    - The generated docs routes are off; the surface is the three player routes.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from player_service.api.routers import players
from player_service.api.services.store import PlayerStore
from player_service.api.settings import Settings, get_settings
from player_service.core.constants import API_PREFIX, ENDPOINTS


def log_banner(settings: Settings) -> None:
    """Log where the server listens and which endpoints it serves."""
    logger.info(f"Server is running at http://{settings.host}:{settings.port}")
    logger.info("Available endpoints:")
    for endpoint in ENDPOINTS:
        logger.info(f"  {endpoint}")


async def plain_text_http_error(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render any HTTPException as a plain-text body."""
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI app.

    Args:
        settings (Optional[Settings]): Overrides; read from the environment if omitted.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log_banner(settings)
        yield

    app = FastAPI(
        title="Player Service API",
        version="0.1.0",
        description="In-memory player directory",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = PlayerStore.seeded()

    if settings.cors_allow_all:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(StarletteHTTPException, plain_text_http_error)

    # Route registration
    app.include_router(players.router, prefix=API_PREFIX, tags=["players"])
    return app


app = create_app()
