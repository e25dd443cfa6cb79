"""
Main entrypoint for the Event Hub API.

This module assembles the FastAPI application, sets up logging,
registers the domain error handlers and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn event_hub_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_from_file
from .core.store import store


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one-time setup tasks such as configuring
    logging and including versioned API routers.  It returns a fully
    configured FastAPI instance ready to be served.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None, settings.log_format)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_error_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    # Register startup event to load the initial dataset into the store.
    @app.on_event("startup")
    async def startup_event() -> None:
        if not settings.seed_on_startup:
            logger.info("Seeding disabled; starting with an empty store")
            return
        seed_from_file(store, settings.data_file)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
