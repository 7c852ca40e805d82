"""
Main entrypoint for the Usuarios API.

``create_app`` builds the FastAPI application: it configures logging,
allows cross-origin requests from any origin, registers the error
handlers and mounts the API router under ``/api``.  The instance is
created at import time as ``app`` so it can be served directly::

    uvicorn usuarios_api.app.main:app --port 3000
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.db import check_connection
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    def startup_event() -> None:
        # One attempt only; the server keeps listening if the store is down.
        check_connection()

    return app


app = create_app()
