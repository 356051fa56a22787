"""FastAPI application factory for the toolbox command API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from toolbox.api.router_hash import router as hash_router
from toolbox.api.router_jwt import router as jwt_router
from toolbox.api.router_regex import router as regex_router
from toolbox.api.router_url import router as url_router
from toolbox.api.router_uuid import router as uuid_router
from toolbox.core.errors import ToolError
from toolbox.core.log_config import configure_logging
from toolbox.core.settings import ToolboxSettings

logger = logging.getLogger(__name__)

HTTP_BAD_REQUEST = 400


async def _tool_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Report caller mistakes as 400 with the tool's message."""
    logger.info("Rejected input: %s", exc)
    return JSONResponse({"error": str(exc)}, status_code=HTTP_BAD_REQUEST)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = ToolboxSettings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("Toolbox API starting")
        yield

    app = FastAPI(
        title="Developer Toolbox",
        version="0.1.0",
        lifespan=lifespan,
    )

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["Authorization", "Content-Type"],
        )

    app.add_exception_handler(ToolError, _tool_error_handler)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(jwt_router)
    app.include_router(hash_router)
    app.include_router(url_router)
    app.include_router(regex_router)
    app.include_router(uuid_router)

    return app
