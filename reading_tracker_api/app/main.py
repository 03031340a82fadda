"""
Main entrypoint for the Reading Tracker API.

This module assembles the FastAPI application: it sets up logging,
enables CORS for the browser client, installs the error handlers that
render every failure as ``{"error": ...}`` and includes the versioned
router.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn reading_tracker_api.app.main:app --reload --port 3000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so that anything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def health() -> str:
        return "API is alive"

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
