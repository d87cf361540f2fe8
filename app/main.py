from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.exceptions import ForbiddenError, ProviderError
from app.infra.logging_config import LoggingConfig
from app.routers import system, webhooks
from app.routers.conversations_router import conversations_router, messages_router
from app.routers.customers_router import customers_router

logger = logging.getLogger(__name__)


def create_app(testing: bool = False) -> FastAPI:
    settings = get_settings()
    if not testing:
        LoggingConfig()

    app = FastAPI(title=settings.app_name, version="0.1.0")

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": exc.message})

    @app.exception_handler(ProviderError)
    async def provider_error_handler(
        request: Request, exc: ProviderError
    ) -> JSONResponse:
        logger.error("Messaging provider error: %s", exc.message)
        return JSONResponse(
            status_code=502, content={"detail": "Messaging provider failed"}
        )

    app.include_router(system.router)
    app.include_router(webhooks.router)
    app.include_router(conversations_router)
    app.include_router(messages_router)
    app.include_router(customers_router)
    return app


def serve() -> None:
    """Run the API under uvicorn on the configured HOST and PORT."""
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
