"""
Main entrypoint for the Service Hub API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn service_hub_api.app.main:app --reload

Unless a registry is passed in, the SQLite-backed registry named by
``Settings.database_url`` is opened when the application starts.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.deps import request_validation_handler
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .registry import Registry, sqlite_registry


def create_app(app_settings: Optional[Settings] = None, registry: Optional[Registry] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    registry : Optional[Registry]
        Pre-built registry (tests pass an in-memory one).  When omitted,
        a SQLite registry is opened on start-up.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router, prefix="/api/v1")
    app.state.registry = registry

    @app.on_event("startup")
    async def startup_event() -> None:
        # Opening the SQLite stores applies pending migrations.
        if app.state.registry is None:
            app.state.registry = sqlite_registry(app_settings)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
