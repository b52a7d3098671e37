"""
Main entrypoint for the Contact Directory API.

This module assembles the FastAPI application, sets up logging,
creates the contact store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn contact_directory_api.app.main:app --reload

or with ``python run.py`` from the project root.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import method_not_allowed, router as v1_router
from .services.contact_service import ContactStore

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Each call returns an application with its own, empty contact
    store.  Errors are rendered as single‑line plain‑text bodies.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The one store shared by every request handler.  Endpoints reach
    # it through ``api.dependencies.get_contact_store``.
    app.state.contact_store = ContactStore()

    app.include_router(v1_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            exc = method_not_allowed(request) or exc
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled exception on %s", request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
