"""Entry point for the Usuarios API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); database settings are described in
``usuarios_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from usuarios_api.app.core.config import settings
from usuarios_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    # log_config=None keeps uvicorn on the handlers set up by create_app.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=getattr(logging, settings.log_level.upper(), logging.INFO),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Servidor escuchando en http://localhost:%s", settings.port)
    await server.serve()


def main() -> None:
    asyncio.run(run_api())


if __name__ == "__main__":
    main()
