"""
Main entrypoint for the Catalog View Service.

This module assembles the FastAPI application, sets up logging and
includes the page routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn catalog_view.app.main:app --port 8080

Errors are returned as plain text with the HTTP status code.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse("Invalid request parameters", status_code=status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the modules imported below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.version, debug=settings.debug)
    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("%s %s listening on http://%s:%s", settings.project_name, settings.version, settings.host, settings.port)
        logger.info("Upstream catalog API: %s", settings.catalog_api_url)
        logger.info("Features: search, recommendations, comparison")

    return app


app = create_app()
